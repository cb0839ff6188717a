"""Line-based console for Zeus.

Reads one expression per line, evaluates it in a single session and prints
the result in reader syntax, or ``Error: <message>``. ``exit`` or end of
input leaves the loop.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable

from zeus import config
from zeus.interpreter import Interpreter
from zeus.printer import format_expr
from zeus.types.errors import ZeusError

logger = logging.getLogger(__name__)

RECURSION_LIMIT = 5000
RECURSION_MESSAGE = "Error: maximum recursion depth exceeded"


def load_preludes(interpreter: Interpreter) -> None:
    for path in config.get_prelude_paths():
        logger.debug("loading prelude %s", path)
        interpreter.eval_prelude(path.read_text(encoding="utf-8"))


def run(
    interpreter: Interpreter,
    read_line: Callable[[str], str] = input,
    prompt: str | None = None,
) -> None:
    prompt = config.get_prompt() if prompt is None else prompt
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            print()
            break
        line = line.strip()
        if line == "exit":
            break
        if not line:
            continue
        try:
            result = interpreter.eval(line)
        except ZeusError as err:
            print(f"Error: {err}")
        except RecursionError:
            logger.debug("recursion limit reached evaluating %s", line)
            print(RECURSION_MESSAGE)
        else:
            print(format_expr(result))
    print("Goodbye!")


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    sys.setrecursionlimit(RECURSION_LIMIT)
    interpreter = Interpreter()
    try:
        load_preludes(interpreter)
    except ZeusError as err:
        print(f"Error: {err}")
    except RecursionError:
        print(RECURSION_MESSAGE)
    run(interpreter)


if __name__ == "__main__":
    main()
