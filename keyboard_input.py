import threading

import keyboard

QUIT_KEYS = {"esc", "q"}
QUIT_HOTKEY = "ctrl+c"

# blessed sequence names -> keyboard library key names
TERMINAL_KEYS = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ESCAPE": "esc",
}


def dispatch(loop, name):
    if name is None:
        return
    if name in QUIT_KEYS:
        loop.quit()
        return
    loop.on_keypress(name)


class KeyboardInput:
    """
    Feeds global key presses into a GameLoop.
    Note: the keyboard library needs root on Linux; start() raises otherwise.
    """

    def __init__(self, loop):
        self.loop = loop
        self._hooked = False

    def handle(self, event):
        dispatch(self.loop, getattr(event, "name", None))

    def start(self):
        keyboard.on_press(self.handle)
        self._hooked = True
        keyboard.add_hotkey(QUIT_HOTKEY, self.loop.quit)

    def stop(self):
        if self._hooked:
            keyboard.unhook_all()
            self._hooked = False

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()


class TerminalInput:
    """Reads keys from a blessed terminal on a background thread."""

    def __init__(self, loop, term, timeout=0.1):
        self.loop = loop
        self.term = term
        self.timeout = timeout
        self._stop = threading.Event()
        self._thread = None

    def handle(self, keystroke):
        if keystroke.is_sequence:
            name = TERMINAL_KEYS.get(keystroke.name)
        else:
            name = str(keystroke).lower() or None
        dispatch(self.loop, name)

    def _read(self):
        while not self._stop.is_set() and not self.loop.ended:
            keystroke = self.term.inkey(timeout=self.timeout)
            if keystroke:
                self.handle(keystroke)

    def start(self):
        self._stop.clear()
        self._thread = threading.Thread(target=self._read, daemon=True)
        self._thread.start()

    def stop(self):
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()


def start_input(loop, term):
    """
    Start global key hooks, or read keys from term when the keyboard
    library can't hook them (non-root Linux, no input devices).
    """
    source = KeyboardInput(loop)
    try:
        source.start()
    except (ImportError, OSError):
        source.stop()
        source = TerminalInput(loop, term)
        source.start()
    return source
