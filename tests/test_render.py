"""
Tests for the render sinks.
"""

from io import StringIO
from unittest import TestCase, main
from unittest.mock import patch

import matplotlib

matplotlib.use('Agg')

from matplotlib import pyplot as plt  # noqa: E402
from matplotlib.colors import to_hex  # noqa: E402

from tileboard.core import Grid  # noqa: E402
from tileboard.render import (  # noqa: E402
    LOSE_MESSAGE,
    UNKNOWN_MOVE_MESSAGE,
    WIN_MESSAGE,
    ConsoleActuator,
    GameMetadata,
    RecordingActuator,
    format_board,
    message_for,
)
from tileboard.render.windows import DEFAULT_COLOR, WindowActuator, WindowBoard, tile_color  # noqa: E402


class TestMetadata(TestCase):
    def test_message_for(self):
        self.assertIsNone(message_for(GameMetadata(score=12)))
        self.assertEqual(message_for(GameMetadata(over=True)), LOSE_MESSAGE)
        self.assertEqual(message_for(GameMetadata(won=True)), WIN_MESSAGE)

    def test_terminated(self):
        self.assertFalse(GameMetadata().terminated)
        self.assertTrue(GameMetadata(won=True).terminated)


class TestRecordingActuator(TestCase):
    def test_records_snapshots(self):
        """Frames keep a snapshot, later grid changes do not alter them."""
        actuator = RecordingActuator()
        grid = Grid.from_rows([[2, 0], [0, 4]])

        actuator.actuate(grid, GameMetadata(score=0))
        grid.remove_tile(grid.cell_content((0, 0)))
        actuator.actuate(grid, GameMetadata(score=8))

        self.assertEqual(len(actuator.frames), 2)
        self.assertEqual(len(actuator.frames[0].tiles), 2)
        self.assertEqual(actuator.last.metadata.score, 8)

    def test_restart_clears_score(self):
        actuator = RecordingActuator()
        actuator.restart()

        self.assertEqual(actuator.clears, 1)

    def test_show_text(self):
        actuator = RecordingActuator()
        actuator.show_text(UNKNOWN_MOVE_MESSAGE)

        self.assertEqual(actuator.texts, [UNKNOWN_MOVE_MESSAGE])
        self.assertEqual(actuator.frames, [])


class TestConsoleActuator(TestCase):
    def setUp(self):
        self.stream = StringIO()
        self.actuator = ConsoleActuator(stream=self.stream)
        self.grid = Grid.from_rows([[2, 0], [0, 1024]])

    def test_format_board(self):
        self.assertEqual(format_board(self.grid), '2 \t.\n. \t1024')

    def test_actuate(self):
        self.actuator.actuate(self.grid, GameMetadata(score=12))
        lines = self.stream.getvalue().splitlines()

        self.assertEqual(lines, ['Score: 12', '2 \t.', '. \t1024'])
        self.assertEqual(self.actuator.score, 12)

    def test_actuate_won(self):
        self.actuator.actuate(self.grid, GameMetadata(score=2048, won=True))

        self.assertEqual(self.stream.getvalue().splitlines()[-1], WIN_MESSAGE)

    def test_clear_score(self):
        self.actuator.actuate(self.grid, GameMetadata(score=12))
        self.actuator.restart()

        self.assertEqual(self.actuator.score, 0)

    def test_show_text(self):
        self.actuator.show_text(UNKNOWN_MOVE_MESSAGE)

        self.assertEqual(self.stream.getvalue().splitlines(), [UNKNOWN_MOVE_MESSAGE])


@patch('tileboard.render.windows.plt.pause')
class TestWindowActuator(TestCase):
    def setUp(self):
        self.window = WindowBoard(title='test', size=2)
        self.actuator = WindowActuator(self.window)

    def tearDown(self):
        plt.close('all')

    def test_tile_color(self, _):
        self.assertEqual(tile_color(2), '#EEE4DA')
        self.assertEqual(tile_color(8192), DEFAULT_COLOR)

    def test_actuate(self, _):
        """Cells are drawn row by row from the top, with the score as title."""
        grid = Grid.from_rows([[2, 0], [0, 8]])
        self.actuator.actuate(grid, GameMetadata(score=16))

        self.assertEqual([text.get_text() for text in self.window.textes], ['2', '', '', '8'])
        self.assertEqual(to_hex(self.window.axes[0].get_facecolor()), tile_color(2).lower())
        self.assertEqual(to_hex(self.window.axes[3].get_facecolor()), tile_color(8).lower())
        self.assertEqual(self.window.title.get_text(), 'Score: 16')

    def test_actuate_over(self, _):
        grid = Grid.from_rows([[2, 4], [4, 2]])
        self.actuator.actuate(grid, GameMetadata(score=16, over=True))

        self.assertEqual(self.window.title.get_text(), LOSE_MESSAGE)

    def test_clear_score(self, _):
        self.actuator.actuate(Grid(2), GameMetadata(score=16))
        self.actuator.restart()

        self.assertEqual(self.actuator.score, 0)
        self.assertEqual(self.window.title.get_text(), '')

    def test_show_text(self, _):
        self.actuator.show_text(UNKNOWN_MOVE_MESSAGE)

        self.assertEqual(self.window.title.get_text(), UNKNOWN_MOVE_MESSAGE)

    def test_close(self, _):
        self.window.close()

        self.assertTrue(self.window.closed)


if __name__ == '__main__':
    main()
