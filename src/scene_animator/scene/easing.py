"""Easing curve applied to linear reveal progress."""


def ease_in_out_cubic(t: float) -> float:
    """
    Cubic ease-in/ease-out.

    Accelerates through the first half and decelerates through the second,
    mapping [0, 1] onto [0, 1] with ``ease(0.5) == 0.5``.

    Args:
        t: Linear progress; values outside [0, 1] are clamped

    Returns:
        Eased progress in [0, 1]
    """
    t = min(max(t, 0.0), 1.0)
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


ease = ease_in_out_cubic
