"""A small terminal animation: dots, typed commands and a scrolled history."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, Optional, Sequence, TextIO

CLEAR_SCREEN = "\x1b[2J\x1b[H"

_HISTORY = (
    "   488 cd /opt/LLL/controller/laser/",
    "   489 vi LLLSDLaserControl.c",
    "   490 make",
    "   491 make install",
    "   492 ./sanity_check",
    "   493 ./configure -o test.cfg",
    "   494 vi test.cfg",
    "   495 vi `/last_will_and_testament.txt",
    "   496 cat /proc/meminfo",
    "   497 ps -a -x -u",
    "   498 kill -9 2207",
    "   499 kill 2208",
    "   500 ps -a -x -u",
    "   501 touch /opt/LLL/run/ok",
    "   502 LLLSDLaserControl -ok 1",
)


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    _write(_out(stream), CLEAR_SCREEN)


def clear_characters(count: int, stream: Optional[TextIO] = None) -> None:
    """Erase the last ``count`` characters written on the current line."""
    _write(_out(stream), "\b" * count + " " * count + "\b" * count)


def loading_dots(
    count: int,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Draw three dots one by one and erase them, ``count`` times, then leave three."""
    out = _out(stream)
    for _ in range(count):
        for _ in range(3):
            sleep(0.5)
            _write(out, ".")
        sleep(0.5)
        clear_characters(3, out)
    _write(out, "...")


def typewriter(
    text: str,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Write ``text`` one character at a time."""
    out = _out(stream)
    for char in text:
        _write(out, char)
        sleep(0.1)


def play(
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run the whole animation."""
    out = _out(stream)

    def say(text: str, pause: float = 0.0) -> None:
        _write(out, text)
        if pause:
            sleep(pause)

    def type_(text: str, pause: float) -> None:
        typewriter(text, out, sleep)
        sleep(pause)

    say("Initializing SolarOS")
    loading_dots(1, out, sleep)
    say("\n")
    say("Done\n...\n\n$ ", 1)
    type_("whoami", 2)
    say("\nflynn\n\n$ ", 1)
    type_("uname -a", 1)
    say("\nSolarOS 4.0.1 Generic_50203-02 sun4m i386 \nUnknown.Unknown\n\n$ ", 1)
    type_("login -n root", 1)
    say("\nLogin incorrect\n\n$ ", 1)
    type_("login: backdoor", 2)
    say(
        "\nNo home directory specified in password file!\nLogging in with home*/\n\n# ",
        1,
    )
    type_("bin/history", 1)
    say("\n")
    loading_dots(2, out, sleep)
    say("\b\b\b")
    for line in _HISTORY:
        say(line + "\n", 0.3)
    say("\n# ", 2)
    type_("./LLLSDLaserControl -ok 1", 2)
    clear_screen(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play a short terminal animation.")
    parser.parse_args(argv)
    play()
    return 0