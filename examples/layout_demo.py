from hexcoords import (
    Hex,
    LayoutSettings,
    hex_linedraw_nudged,
    hex_round,
    hexagon_region,
    rectangle_region,
)

settings = LayoutSettings(orientation="flat", size_x=50, size_y=50, origin_x=512, origin_y=512)
layout = settings.build()


if __name__ == "__main__":
    for h in hexagon_region(1):
        center, corners = layout.points(h)
        print(h, "center:", center, "corners:", ", ".join(str(c) for c in corners))

    print("square map:", rectangle_region(layout, 2, 2))
    print("line:", hex_linedraw_nudged(Hex(0, 0, 0), Hex(3, -1, -2)))
    print("hit test:", hex_round(layout.pixel_to_hex(layout.hex_to_pixel(Hex(2, -1, -1)))))
