from __future__ import annotations

import inspect
import re

import pytest

import hexcoords

LEGACY_UNION = re.compile(r"\b(Optional|Union)\[")


def _public_callables():
    for name in hexcoords.__all__:
        obj = getattr(hexcoords, name)
        if inspect.isclass(obj):
            for attr, member in vars(obj).items():
                if attr.startswith("__") and attr != "__init__":
                    continue
                func = getattr(member, "__func__", member)
                if inspect.isfunction(func):
                    yield f"{name}.{attr}", func
        elif inspect.isfunction(obj):
            yield name, obj


@pytest.mark.parametrize(("qualname", "func"), list(_public_callables()))
def test_public_api_annotations_use_pep604_unions(qualname, func):
    legacy = {
        param: annotation
        for param, annotation in func.__annotations__.items()
        if isinstance(annotation, str) and LEGACY_UNION.search(annotation)
    }
    assert not legacy, f"{qualname} uses typing unions: {legacy}"


def test_parity_accepting_functions_annotate_the_union():
    for func in (hexcoords.qoffset_from_cube, hexcoords.roffset_to_cube, hexcoords.Parity.coerce):
        assert "|" in func.__annotations__[next(iter(func.__annotations__))]
