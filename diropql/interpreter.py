"""Writer and interpreter for diropql programs.

A diropql program runs on a circular tape of byte cells. The commands are
``l``/``r`` (move left/right), ``i``/``d`` (increment/decrement the current
cell), ``o`` (output the current cell as a character) and ``p``/``q``
(loop while the current cell is non-zero). Other characters are ignored.
"""

from __future__ import annotations

MEMORY_SIZE = 10000


def write_diropql(text: str) -> str:
    """Return a program that prints ``text``, one fresh cell per character.

    Characters are reduced to their low byte, so only code points up to 255
    survive unchanged.
    """
    return "r" + "".join("i" * (ord(char) & 0xFF) + "or" for char in text)


def _match_loops(program: str) -> dict[int, int]:
    """Pair each ``p`` with its ``q``; unmatched brackets are left out."""
    jumps: dict[int, int] = {}
    open_loops: list[int] = []
    for position, command in enumerate(program):
        if command == "p":
            open_loops.append(position)
        elif command == "q" and open_loops:
            start = open_loops.pop()
            jumps[start] = position
            jumps[position] = start
    return jumps


def read_diropql(program: str) -> str:
    """Run ``program`` and return everything it printed.

    Raises ValueError when a loop jump has no matching bracket.
    """
    jumps = _match_loops(program)
    memory = bytearray(MEMORY_SIZE)
    pointer = 0
    position = 0
    output: list[str] = []

    while position < len(program):
        command = program[position]
        if command == "l":
            pointer = (pointer - 1) % MEMORY_SIZE
        elif command == "r":
            pointer = (pointer + 1) % MEMORY_SIZE
        elif command == "i":
            memory[pointer] = (memory[pointer] + 1) & 0xFF
        elif command == "d":
            memory[pointer] = (memory[pointer] - 1) & 0xFF
        elif command == "o":
            output.append(chr(memory[pointer]))
        elif command == "p":
            if memory[pointer] == 0:
                if position not in jumps:
                    raise ValueError(f"unmatched 'p' at position {position}")
                position = jumps[position]
        elif command == "q":
            if memory[pointer] != 0:
                if position not in jumps:
                    raise ValueError(f"unmatched 'q' at position {position}")
                position = jumps[position]
        position += 1

    return "".join(output)