from __future__ import generator_stop

from dcalgos.math import is_power_of_two
from dcalgos.test import MyTestCase, parametrize


class MathTest(MyTestCase):
    @parametrize(
        (1, True),
        (2, True),
        (4, True),
        (1024, True),
        (2**100, True),
        (0, False),
        (-2, False),
        (3, False),
        (6, False),
        (1023, False),
    )
    def test_is_power_of_two(self, num, truth):
        result = is_power_of_two(num)
        self.assertEqual(truth, result)


if __name__ == "__main__":
    import unittest

    unittest.main()
