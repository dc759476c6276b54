"""Interactive menu for exploring the sample non-binary tree."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from civitree.nbtree import NonBinaryTree, create_sample_tree, max_info

_MENU = (
    "\n=== MENU POHON NON-BINER ===\n"
    "1. Traversal PreOrder\n"
    "2. Traversal InOrder\n"
    "3. Traversal PostOrder\n"
    "4. Traversal LevelOrder\n"
    "5. Print Tree\n"
    "6. Search Node Tree\n"
    "7. Jumlah Daun/Leaf\n"
    "8. Mencari Level Node Tree\n"
    "9. Kedalaman Tree\n"
    "10. Membandingkan 2 Node Tree\n"
    "11. Exit\n"
    "Pilih Menu: "
)
_EXIT = 11
_INTEGER = re.compile(r"[+-]?\d+")


class _Scanner:
    """Reads whitespace-separated integers and characters from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_space(self) -> bool:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return True
            line = self._stream.readline()
            if not line:
                return False
            self._buffer = line

    def read_int(self) -> int | None:
        """Next integer; 0 for unreadable input, None at end of input."""
        if not self._skip_space():
            return None
        match = _INTEGER.match(self._buffer)
        if match is None:
            self._buffer = ""
            return 0
        # The character following the number is consumed with it.
        self._buffer = self._buffer[match.end() + 1 :]
        return int(match.group())

    def read_char(self) -> str | None:
        """Next non-blank character, or None at end of input."""
        if not self._skip_space():
            return None
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char


def run_menu(tree: NonBinaryTree, stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    scanner = _Scanner(stdin)
    while True:
        stdout.write(_MENU)
        choice = scanner.read_int()
        if choice is None:
            return 0

        if choice == 1:
            stdout.write("\nTraversal PreOrder: ")
            if tree.is_empty():
                stdout.write("Tree kosong\n")
            else:
                stdout.write("".join(tree.preorder()) + "\n")
        elif choice == 2:
            stdout.write("\nTraversal InOrder: ")
            stdout.write("".join(tree.inorder()) + "\n")
        elif choice == 3:
            stdout.write("\nTraversal PostOrder: ")
            stdout.write("".join(tree.postorder()) + "\n")
        elif choice == 4:
            stdout.write("\nTraversal LevelOrder: ")
            if not tree.is_empty():
                stdout.write("".join(f"{info} " for info in tree.level_order()) + "\n")
        elif choice == 5:
            stdout.write("\nStruktur Tree:\n")
            stdout.write(tree.describe())
        elif choice == 6:
            stdout.write("\nMasukkan huruf node yang dicari: ")
            wanted = scanner.read_char()
            if wanted is None:
                return 0
            if tree.search(wanted):
                stdout.write(f"Node '{wanted}' ditemukan.\n")
            else:
                stdout.write(f"Node '{wanted}' tidak ditemukan.\n")
        elif choice == 7:
            stdout.write(f"\nJumlah daun: {tree.leaf_count()}\n")
        elif choice == 8:
            stdout.write("\nMasukkan node yang ingin dicari levelnya: ")
            wanted = scanner.read_char()
            if wanted is None:
                return 0
            stdout.write(f"Level dari node '{wanted}' adalah: {tree.level(wanted)}\n")
        elif choice == 9:
            stdout.write(f"\nKedalaman tree: {tree.depth()}\n")
        elif choice == 10:
            stdout.write("\nMasukkan 2 node untuk dibandingkan (contoh: B J): ")
            first = scanner.read_char()
            second = scanner.read_char() if first is not None else None
            if first is None or second is None:
                return 0
            if not tree.search(first) or not tree.search(second):
                stdout.write("Salah satu atau kedua node tidak ditemukan.\n")
            else:
                stdout.write(
                    "Node dengan nilai maksimum secara ASCII adalah: "
                    f"{max_info(first, second)}\n"
                )
        elif choice == _EXIT:
            stdout.write("Keluar dari program.\n")
            return 0
        else:
            stdout.write("Pilihan tidak valid. Silakan coba lagi.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the tree menu on the sample tree, using standard input and output."""
    parser = argparse.ArgumentParser(description="Explore a sample non-binary tree.")
    parser.parse_args(argv)
    return run_menu(create_sample_tree(), sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())