"""ELF / eBPF object inspection for the one-time load report.

Only headers and the section table are decoded. Sections are grouped the way
eBPF loaders see them: executable sections are programs, `maps` sections are
map definitions.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import Literal

from hexgrid.core.io import LoadError, load

logger = logging.getLogger(__name__)

ELF_MAGIC = b"\x7fELF"
EI_NIDENT = 16

ELFCLASS32 = 1
ELFCLASS64 = 2
ELFDATA2LSB = 1
ELFDATA2MSB = 2

SHF_EXECINSTR = 0x4
SHT_NOBITS = 8
SHN_UNDEF = 0

# Layout after e_ident: type, machine, version, entry, phoff, shoff, flags,
# ehsize, phentsize, phnum, shentsize, shnum, shstrndx
_EHDR = {ELFCLASS32: "HHIIIIIHHHHHH", ELFCLASS64: "HHIQQQIHHHHHH"}
# name, type, flags, addr, offset, size, link, info, addralign, entsize
_SHDR = {ELFCLASS32: "IIIIIIIIII", ELFCLASS64: "IIQQQQIIQQ"}

ELF_TYPES = {0: "none", 1: "relocatable", 2: "executable", 3: "shared object", 4: "core"}

ELF_MACHINES = {
    0: "none",
    3: "x86",
    8: "mips",
    20: "powerpc",
    21: "powerpc64",
    40: "arm",
    62: "x86-64",
    183: "aarch64",
    243: "risc-v",
    247: "bpf",
}

SECTION_TYPES = {
    0: "null",
    1: "progbits",
    2: "symtab",
    3: "strtab",
    4: "rela",
    5: "hash",
    6: "dynamic",
    7: "note",
    8: "nobits",
    9: "rel",
    11: "dynsym",
}

EM_BPF = 247

Endianness = Literal["little", "big"]


class StructuralParseError(ValueError):
    """Raised when a file cannot be read or decoded as an ELF object."""


@dataclass(frozen=True)
class Section:
    index: int
    name: str
    type: str
    flags: int
    offset: int
    size: int

    @property
    def executable(self) -> bool:
        return bool(self.flags & SHF_EXECINSTR)


@dataclass(frozen=True)
class StructureReport:
    format: str
    bits: int
    endian: Endianness
    type: str
    machine: str
    entry: int
    sections: list[Section] = field(default_factory=list)

    @property
    def is_bpf(self) -> bool:
        return self.machine == "bpf"

    @property
    def programs(self) -> list[Section]:
        return [s for s in self.sections if s.executable and s.size > 0]

    @property
    def maps(self) -> list[Section]:
        return [s for s in self.sections if _is_map_section(s.name)]


def _is_map_section(name: str) -> bool:
    return name in ("maps", ".maps") or name.startswith("maps/")


def _unpack(fmt: str, data: bytes, offset: int, what: str) -> tuple:
    size = struct.calcsize(fmt)
    if offset < 0 or offset + size > len(data):
        raise StructuralParseError(f"{what} truncated at 0x{offset:X}")
    return struct.unpack_from(fmt, data, offset)


def _cstring_at(table: bytes, offset: int) -> str:
    if offset >= len(table):
        return ""
    end = table.find(b"\x00", offset)
    if end == -1:
        end = len(table)
    return table[offset:end].decode("ascii", errors="replace")


def parse_structure(data: bytes) -> StructureReport:
    """Decode the ELF header and section table of `data`.

    Raises StructuralParseError on non-ELF input or when any table points
    outside the buffer.
    """
    if len(data) < EI_NIDENT or data[:4] != ELF_MAGIC:
        raise StructuralParseError("not an ELF object (bad magic)")
    ei_class = data[4]
    ei_data = data[5]
    if ei_class not in _EHDR:
        raise StructuralParseError(f"unsupported ELF class {ei_class}")
    if ei_data == ELFDATA2LSB:
        endian: Endianness = "little"
        prefix = "<"
    elif ei_data == ELFDATA2MSB:
        endian = "big"
        prefix = ">"
    else:
        raise StructuralParseError(f"unsupported ELF data encoding {ei_data}")

    (
        e_type,
        e_machine,
        _version,
        e_entry,
        _phoff,
        e_shoff,
        _flags,
        _ehsize,
        _phentsize,
        _phnum,
        e_shentsize,
        e_shnum,
        e_shstrndx,
    ) = _unpack(prefix + _EHDR[ei_class], data, EI_NIDENT, "ELF header")

    sections: list[Section] = []
    if e_shoff and e_shnum:
        shdr_fmt = prefix + _SHDR[ei_class]
        if e_shentsize < struct.calcsize(shdr_fmt):
            raise StructuralParseError(f"section header entry size {e_shentsize} too small")
        raw = [
            _unpack(shdr_fmt, data, e_shoff + i * e_shentsize, f"section header {i}")
            for i in range(e_shnum)
        ]
        names = b""
        if e_shstrndx != SHN_UNDEF:
            if e_shstrndx >= e_shnum:
                raise StructuralParseError(f"section name table index {e_shstrndx} out of range")
            str_off, str_size = raw[e_shstrndx][4], raw[e_shstrndx][5]
            if str_off + str_size > len(data):
                raise StructuralParseError("section name table truncated")
            names = data[str_off : str_off + str_size]
        for i, (sh_name, sh_type, sh_flags, _a, sh_offset, sh_size, *_rest) in enumerate(raw):
            if sh_type != SHT_NOBITS and sh_offset + sh_size > len(data):
                raise StructuralParseError(f"section {i} extends past end of file")
            sections.append(
                Section(
                    index=i,
                    name=_cstring_at(names, sh_name),
                    type=SECTION_TYPES.get(sh_type, f"0x{sh_type:X}"),
                    flags=sh_flags,
                    offset=sh_offset,
                    size=sh_size,
                )
            )

    report = StructureReport(
        format="ELF",
        bits=32 if ei_class == ELFCLASS32 else 64,
        endian=endian,
        type=ELF_TYPES.get(e_type, f"0x{e_type:X}"),
        machine=ELF_MACHINES.get(e_machine, f"0x{e_machine:X}"),
        entry=e_entry,
        sections=sections,
    )
    logger.debug("parsed %s with %d sections", report.machine, len(sections))
    return report


def read_structure(path: str) -> StructureReport:
    """Re-read `path` and decode it; read failures surface as StructuralParseError."""
    try:
        data = load(path)
    except LoadError as e:
        raise StructuralParseError(str(e)) from e
    return parse_structure(data)


def format_report(report: StructureReport) -> str:
    lines = [
        f"{report.format}{report.bits} ({report.endian}-endian) {report.type}, "
        f"machine {report.machine}",
        f"  entry: 0x{report.entry:X}",
        f"  sections: {len(report.sections)}",
    ]
    for s in report.sections:
        if s.index == 0 and s.type == "null":
            continue
        lines.append(
            f"    [{s.index:2d}] {s.name or '<unnamed>':<24} {s.type:<9} "
            f"off=0x{s.offset:08X} size={s.size}"
        )
    if report.is_bpf:
        lines.append(f"  programs: {len(report.programs)}")
        for s in report.programs:
            lines.append(f"    {s.name} ({s.size // 8} insns)")
        lines.append(f"  maps: {len(report.maps)}")
        for s in report.maps:
            lines.append(f"    {s.name} ({s.size} bytes)")
    return "\n".join(lines)
