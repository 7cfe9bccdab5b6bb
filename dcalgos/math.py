from __future__ import generator_stop


def is_power_of_two(num: int) -> bool:

    """Returns True for 1, 2, 4, 8, ... and False for everything else including 0
    and negative numbers.
    """

    return num > 0 and num & (num - 1) == 0
