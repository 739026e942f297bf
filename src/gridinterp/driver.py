"""Simple driver evaluating the README example grid."""

# Absolute import so the module runs both as ``python -m gridinterp.driver``
# and as a plain script.
from gridinterp.interpolant import GridInterpolant


def main() -> None:
    axes = [[0.0, 1.0, 2.0, 3.0, 4.0, 5.0], [6.0, 7.0, 8.0, 9.0, 10.0]]
    x, y = GridInterpolant.meshgrid(axes)
    interp = GridInterpolant(axes, -6.0 * x + 3.0 * y)
    point = (0.5, 9.9)
    print(f"f{point} = {float(interp.eval(point)[0]):.12g}")


if __name__ == "__main__":
    main()
