"""
Tests for the input adapters.
"""

from unittest import TestCase, main

from tileboard.controls import (
    classify_swipe,
    classify_zone,
    click_to_direction,
    key_to_direction,
    swipe_to_direction,
)
from tileboard.core import Direction


class TestKeyboard(TestCase):
    def test_arrows_and_letters(self):
        self.assertEqual(key_to_direction('up'), Direction.UP)
        self.assertEqual(key_to_direction('right'), Direction.RIGHT)
        self.assertEqual(key_to_direction('down'), Direction.DOWN)
        self.assertEqual(key_to_direction('left'), Direction.LEFT)
        self.assertEqual(key_to_direction('w'), Direction.UP)
        self.assertEqual(key_to_direction('d'), Direction.RIGHT)

    def test_modifiers_are_ignored(self):
        """Presses with a modifier held never move tiles."""
        self.assertIsNone(key_to_direction('ctrl+up'))
        self.assertIsNone(key_to_direction('shift+a'))
        self.assertIsNone(key_to_direction('up', modifiers=True))

    def test_shifted_letters(self):
        """Matplotlib reports shift+letter as the upper case letter, a modified press."""
        for key in ('W', 'A', 'S', 'D'):
            self.assertIsNone(key_to_direction(key))

    def test_unknown_keys(self):
        for key in (None, '', 'q', 'escape', '+', 'upper'):
            self.assertIsNone(key_to_direction(key))


class TestGestures(TestCase):
    def test_classify_zone(self):
        self.assertEqual(classify_zone(10, 10, 300, 300), ('top', 'left'))
        self.assertEqual(classify_zone(150, 150, 300, 300), ('middle', 'middle'))
        self.assertEqual(classify_zone(290, 290, 300, 300), ('bottom', 'right'))

    def test_classify_zone_empty_surface(self):
        with self.assertRaises(ValueError):
            classify_zone(0, 0, 0, 100)

    def test_click_to_direction(self):
        """Only the edge-centre zones move tiles."""
        self.assertEqual(click_to_direction(150, 10, 300, 300), Direction.UP)
        self.assertEqual(click_to_direction(290, 150, 300, 300), Direction.RIGHT)
        self.assertEqual(click_to_direction(150, 290, 300, 300), Direction.DOWN)
        self.assertEqual(click_to_direction(10, 150, 300, 300), Direction.LEFT)

        for x, y in [(10, 10), (290, 10), (150, 150), (10, 290), (290, 290)]:
            self.assertIsNone(click_to_direction(x, y, 300, 300))

    def test_classify_swipe(self):
        self.assertEqual(classify_swipe(-0.5, 0.0), ('middle', 'left'))
        self.assertEqual(classify_swipe(0.1, -0.4), ('top', 'middle'))
        self.assertEqual(classify_swipe(0.4, 0.4), ('bottom', 'right'))

    def test_swipe_to_direction(self):
        self.assertEqual(swipe_to_direction((0.0, 0.0), (0.0, -0.5)), Direction.UP)
        self.assertEqual(swipe_to_direction((-0.2, 0.0), (0.3, 0.1)), Direction.RIGHT)
        self.assertEqual(swipe_to_direction((0.0, -0.4), (0.0, 0.4)), Direction.DOWN)
        self.assertEqual(swipe_to_direction((0.5, 0.0), (0.0, 0.0)), Direction.LEFT)

        # ##>: Short and diagonal swipes are not moves.
        self.assertIsNone(swipe_to_direction((0.0, 0.0), (0.2, 0.1)))
        self.assertIsNone(swipe_to_direction((0.0, 0.0), (0.5, 0.5)))

    def test_custom_min_step(self):
        self.assertEqual(swipe_to_direction((0.0, 0.0), (0.2, 0.0), min_step=0.1), Direction.RIGHT)


if __name__ == '__main__':
    main()
