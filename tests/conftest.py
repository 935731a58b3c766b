from __future__ import annotations

import struct

import pytest


def build_elf64(
    sections: list[tuple[str, int, int, bytes]],
    *,
    machine: int = 247,
    e_type: int = 1,
    big_endian: bool = False,
) -> bytes:
    """Build a minimal ELF64 object.

    `sections` holds (name, sh_type, sh_flags, payload). A null section and a
    `.shstrtab` are added around them.
    """
    p = ">" if big_endian else "<"
    names = b"\x00"
    name_offsets = []
    for name, *_ in sections:
        name_offsets.append(len(names))
        names += name.encode() + b"\x00"
    shstrtab_name = len(names)
    names += b".shstrtab\x00"

    body = b""
    placed = []
    cursor = 64
    for (_name, _t, _f, payload) in sections:
        placed.append((cursor, len(payload)))
        body += payload
        cursor += len(payload)
    strtab_off = cursor
    body += names
    cursor += len(names)
    shoff = cursor

    shnum = len(sections) + 2
    shstrndx = shnum - 1
    ident = b"\x7fELF" + bytes([2, 2 if big_endian else 1, 1]) + bytes(9)
    header = ident + struct.pack(
        p + "HHIQQQIHHHHHH", e_type, machine, 1, 0, 0, shoff, 0, 64, 0, 0, 64, shnum, shstrndx
    )

    shdrs = struct.pack(p + "IIQQQQIIQQ", 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    for i, (_name, sh_type, sh_flags, _payload) in enumerate(sections):
        off, size = placed[i]
        shdrs += struct.pack(
            p + "IIQQQQIIQQ", name_offsets[i], sh_type, sh_flags, 0, off, size, 0, 0, 1, 0
        )
    shdrs += struct.pack(
        p + "IIQQQQIIQQ", shstrtab_name, 3, 0, 0, strtab_off, len(names), 0, 0, 1, 0
    )
    return header + body + shdrs


def bpf_object() -> bytes:
    return build_elf64(
        [
            ("xdp/prog", 1, 0x6, bytes(16)),  # two 8-byte instructions
            ("maps", 1, 0x3, bytes(20)),
            ("license", 1, 0x3, b"GPL\x00"),
        ]
    )


@pytest.fixture
def bpf_bytes() -> bytes:
    return bpf_object()


@pytest.fixture
def elf_builder():  # type: ignore[no-untyped-def]
    return build_elf64
