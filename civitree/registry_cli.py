"""Interactive menu for managing cities and their residents."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from civitree.registry import (
    MAX_CITIES,
    MAX_NAME,
    CityNotFoundError,
    CityRegistry,
    RegistryFullError,
    ResidentNotFoundError,
)

_MENU = (
    "\nMenu:\n"
    "1. Tambah Kota\n"
    "2. Tambah Warga\n"
    "3. Tampilkan Semua Kota dan Warga\n"
    "4. Tampilkan warga dalam 1 kota\n"
    "5. Hapus Warga\n"
    "6. Hapus Kota\n"
    "7. Keluar\n"
    "Pilih menu: "
)


def _read_choice(stdin: TextIO) -> int | None | str:
    """Next menu choice; None at end of input, '' for unreadable input."""
    for line in stdin:
        text = line.strip()
        if not text:
            continue
        try:
            return int(text)
        except ValueError:
            return ""
    return None


def _read_name(stdin: TextIO, stdout: TextIO, prompt: str) -> str:
    stdout.write(prompt)
    line = stdin.readline()
    return line.split("\n", 1)[0][: MAX_NAME - 1]


def _not_found(stdout: TextIO, city_name: str) -> None:
    stdout.write(f"\nKota '{city_name}' tidak ditemukan.\n")


def run_menu(registry: CityRegistry, stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    while True:
        stdout.write(_MENU)
        choice = _read_choice(stdin)
        if choice is None:
            return 0

        if choice == 1:
            city = _read_name(stdin, stdout, "\nMasukkan nama kota: ")
            try:
                registry.add_city(city)
            except RegistryFullError:
                stdout.write("Jumlah kota sudah mencapai batas maksimal!\n")
            else:
                stdout.write(f"\nKota '{city}' berhasil dimasukkan ke daftar.\n")

        elif choice == 2:
            city = _read_name(stdin, stdout, "\nMasukkan nama kota: ")
            resident = _read_name(stdin, stdout, "Masukkan nama warga: ")
            try:
                registry.add_resident(city, resident)
            except CityNotFoundError:
                _not_found(stdout, city)
            else:
                stdout.write(
                    f"\nWarga '{resident}' berhasil ditambahkan ke kota '{city}'.\n"
                )

        elif choice == 3:
            stdout.write(registry.render_all())

        elif choice == 4:
            city = _read_name(stdin, stdout, "\nMasukkan nama kota: ")
            try:
                stdout.write(registry.render_city(city))
            except CityNotFoundError:
                _not_found(stdout, city)

        elif choice == 5:
            city = _read_name(
                stdin, stdout, "\nMasukkan nama kota tempat tinggal warga: "
            )
            resident = _read_name(
                stdin, stdout, "Masukkan nama warga yang akan dihapus: "
            )
            try:
                registry.remove_resident(city, resident)
            except CityNotFoundError:
                _not_found(stdout, city)
            except ResidentNotFoundError:
                stdout.write(
                    f"\nWarga '{resident}' tidak ditemukan di kota '{city}'.\n"
                )
            else:
                stdout.write(
                    f"\nWarga '{resident}' berhasil dihapus dari kota '{city}'.\n"
                )

        elif choice == 6:
            city = _read_name(stdin, stdout, "\nMasukkan nama kota yang mau dihapus: ")
            try:
                registry.remove_city(city)
            except CityNotFoundError:
                _not_found(stdout, city)
            else:
                stdout.write(
                    f"\nKota '{city}' dan seluruh warganya berhasil dihapus.\n"
                )

        elif choice == 7:
            stdout.write("Keluar dari program.\n")
            return 0

        else:
            stdout.write("Pilihan tidak valid\n")


def main(argv: list[str] | None = None) -> int:
    """Start the city registry menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage cities and residents.")
    limits = parser.add_mutually_exclusive_group()
    limits.add_argument(
        "--max-cities",
        type=int,
        default=MAX_CITIES,
        help="maximum number of cities (default: %(default)s)",
    )
    limits.add_argument(
        "--unlimited",
        action="store_true",
        help="allow any number of cities",
    )
    args = parser.parse_args(argv)
    if args.max_cities < 0:
        parser.error("--max-cities must not be negative")
    registry = CityRegistry(None if args.unlimited else args.max_cities)
    return run_menu(registry, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())