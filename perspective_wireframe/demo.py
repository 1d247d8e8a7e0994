#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .canvas import Canvas
from .config import RenderConfig
from .errors import DegenerateViewError
from .scene import Scene
from .viewer import Viewer

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    ord('w'): 'w',
    ord('a'): 'a',
    ord('s'): 's',
    ord('d'): 'd',
    curses.KEY_LEFT: 'left',
    curses.KEY_RIGHT: 'right',
}


class DemoApp:
    """
    Interactive curses harness: collects held keys, ticks the viewer and
    blits its canvas to the terminal.
    """

    def __init__(self, stdscr, scene: Scene, config: RenderConfig):
        self.stdscr = stdscr
        self.running = True
        self.config = config

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        w, h = self._canvas_size()
        self.canvas = Canvas(w, h)
        self.viewer = Viewer(scene, self.canvas, w, h, config.make_controller())
        self.last_count = 0
        self.message = ""

    def _canvas_size(self):
        th, tw = self.stdscr.getmaxyx()
        return max(2, (tw - 1) * 2), max(4, (th - 2) * 4)

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def poll_keys(self):
        """Drain pending key presses; they count as held for this tick."""
        keys = set()
        while True:
            try:
                key = self.stdscr.getch()
            except curses.error:
                key = -1
            if key == -1:
                break
            if key == ord('q'):
                self.running = False
            elif key == ord('b'):
                self.config.use_braille = not self.config.use_braille
            elif key == curses.KEY_RESIZE:
                self._resize()
            elif key in _KEY_NAMES:
                keys.add(_KEY_NAMES[key])
        return keys

    def _resize(self):
        w, h = self._canvas_size()
        self.canvas = Canvas(w, h)
        self.viewer.port = self.canvas
        self.viewer.width, self.viewer.height = w, h

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        while self.running:
            start_time = time.time()
            keys = self.poll_keys()
            if not self.running:
                break

            try:
                self.last_count = self.viewer.tick(keys)
                self.message = ""
            except DegenerateViewError as e:
                # Degenerate camera: keep showing the last good frame.
                logger.warning(f"Camera command refused: {e}")
                self.message = str(e)

            self.blit()

            ms = (time.time() - start_time) * 1000
            self.draw_hud(ms)
            self.stdscr.refresh()

            remaining = self.config.frame_delay - (time.time() - start_time)
            if remaining > 0:
                time.sleep(remaining)

    def blit(self):
        self.stdscr.erase()
        th, tw = self.stdscr.getmaxyx()
        for y, line in enumerate(self.canvas.rows(self.config.use_braille)[:th - 2]):
            try:
                self.stdscr.addstr(y + 1, 0, line[:tw - 1])
            except curses.error:
                pass

    def draw_hud(self, ms):
        th, tw = self.stdscr.getmaxyx()
        view = self.viewer.scene.view
        prp = ", ".join(f"{c:.1f}" for c in view.prp)
        srp = ", ".join(f"{c:.1f}" for c in view.srp)
        hdr = (f" OBJ:{len(self.viewer.scene.models)}"
               f" | SEG:{self.last_count}"
               f" | PRP:({prp}) SRP:({srp})"
               f" | {ms:.1f}ms "
               f"{self.message}")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:tw - 1], curses.A_BOLD)
        except curses.error:
            pass


def main(stdscr, scene: Scene, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, scene, config)
    app.run()
