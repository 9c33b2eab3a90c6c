"""Hyperbola demo: twisted circles joined by lines.

A 4x4 grid of hyperbola shapes is described by a single
``HyperbolaFunc`` whose parameter is ``(height, index, position)``.
The phase of each shape oscillates with time at a rate set by its
index, so the surfaces twist and untwist while the window is open.

For every shape the bottom and top edges, three intermediate rings and
the diagonal surface are sampled into points and drawn with a fixed
oblique projection that slowly turns around the vertical axis.

Usage:
    # Open the animated viewer (requires pyglet)
    python hyperbola.py

    # Write one frame of curves and surface wireframes to DXF
    python hyperbola.py --dxf hyperbola --time 1.5
"""

import argparse
import logging
import math

from hopoint.algebra import TAU
from hopoint.func import Func
from hopoint.hyperbola import HyperbolaFunc
from hopoint.sampling import Sampler
from hopoint.shape import INDEX, SCALAR, TupleShape

GRID = TupleShape((SCALAR, INDEX, SCALAR))


def grid_hyperbola(time):
    """Hyperbola over ``(height, index, position)`` at animation *time*."""

    return HyperbolaFunc(Func(lambda v: v[0], GRID),
                         Func(lambda v: 0.5 * v[2] * math.sin(v[1] * time), GRID))


def shapes(time, n=4):
    """Yield ``(hyperbola, offset)`` for every cell of the grid."""

    hf = grid_hyperbola(time)
    for j in range(n):
        y = j / n
        for i in range(n):
            x = i / (n - 1)
            yield hf.call((y * 2.0 + 2.0, i, x)), [y * 16.0, 0.0, x * 16.0]


def sample_frame(time, n=4, rings=3):
    """Sample edges, rings and surfaces of every shape at *time*."""

    sampler = Sampler()
    for hy, offset in shapes(time, n):
        sampler.sample(hy.bottom() + offset, 50)
        sampler.sample(hy.top() + offset, 50)
        sampler.sample2(hy.surface() + offset, (10, 30))
        for r in range(rings):
            sampler.sample(hy.ring((r + 1) / (rings + 1)) + offset, 30)
    return sampler


def write_dxf(filename, time, n=4):
    from hopoint.ezdxf_drawable import ezdxfDraw

    dd = ezdxfDraw()
    dd.filename = filename
    for hy, offset in shapes(time, n):
        dd.layer = 'CURVES'
        dd.draw_curve(hy.bottom() + offset, 50, closed=True)
        dd.draw_curve(hy.top() + offset, 50, closed=True)
        dd.layer = 'SURFACES'
        dd.draw_surface(hy.surface() + offset, (10, 30))
    dd.display()
    print(f"wrote {filename}.dxf")


def project(p, yaw, scale, center):
    """Oblique projection of a point onto the window plane."""

    pitch = 0.35
    # model space is centred on the middle of the grid
    x, y, z = p.x - 8.0, p.y, p.z - 8.0
    u = x * math.cos(yaw) - z * math.sin(yaw)
    depth = x * math.sin(yaw) + z * math.cos(yaw)
    v = y * math.cos(pitch) + depth * math.sin(pitch)
    return center[0] + u * scale, center[1] + v * scale


def run_viewer(n=4, rings=3, spin=0.1):
    import pyglet
    from pyglet import shapes as pshapes

    window = pyglet.window.Window(800, 600, caption="hopoint hyperbola", resizable=True)
    state = {'time': 0.0, 'batch': pyglet.graphics.Batch(), 'dots': []}

    def rebuild():
        batch = pyglet.graphics.Batch()
        scale = min(window.width, window.height) / 32.0
        center = (window.width / 2.0, window.height / 3.0)
        yaw = (state['time'] * spin) % 1.0 * TAU
        dots = []
        for p in sample_frame(state['time'], n, rings):
            if not (math.isfinite(p.x) and math.isfinite(p.y) and math.isfinite(p.z)):
                continue
            sx, sy = project(p, yaw, scale, center)
            dots.append(pshapes.Circle(sx, sy, 1.2, color=(40, 40, 40), batch=batch))
        state['batch'] = batch
        state['dots'] = dots

    def update(dt):
        state['time'] += dt
        rebuild()

    @window.event
    def on_draw():
        pyglet.gl.glClearColor(1.0, 1.0, 1.0, 1.0)
        window.clear()
        state['batch'].draw()

    rebuild()
    pyglet.clock.schedule_interval(update, 1 / 20.0)
    pyglet.app.run()


def main():
    parser = argparse.ArgumentParser(
        description="Twisting hyperbola shapes built from circles and lines"
    )
    parser.add_argument(
        "--dxf",
        metavar="FILENAME",
        help="Write one frame to FILENAME.dxf instead of opening a window"
    )
    parser.add_argument(
        "--time",
        type=float,
        default=1.0,
        help="Animation time of the frame written with --dxf"
    )
    parser.add_argument(
        "--grid",
        type=int,
        default=4,
        help="Number of shapes along each side of the grid (at least 2)"
    )
    parser.add_argument(
        "--rings",
        type=int,
        default=3,
        help="Intermediate rings drawn per shape"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log sampling")
    args = parser.parse_args()

    if args.grid < 2:
        parser.error("--grid must be at least 2")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.dxf:
        write_dxf(args.dxf, args.time, args.grid)
        return

    run_viewer(args.grid, args.rings)


if __name__ == "__main__":
    main()
