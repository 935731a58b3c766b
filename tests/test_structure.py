from __future__ import annotations

from pathlib import Path

import pytest

from hexgrid.core.structure import (
    StructuralParseError,
    format_report,
    parse_structure,
    read_structure,
)


def test_bpf_object_header_and_sections(bpf_bytes: bytes) -> None:
    rep = parse_structure(bpf_bytes)
    assert rep.format == "ELF"
    assert rep.bits == 64
    assert rep.endian == "little"
    assert rep.type == "relocatable"
    assert rep.machine == "bpf"
    assert rep.is_bpf
    assert [s.name for s in rep.sections] == ["", "xdp/prog", "maps", "license", ".shstrtab"]
    assert rep.sections[1].offset == 64 and rep.sections[1].size == 16
    assert rep.sections[4].type == "strtab"


def test_programs_and_maps_classified(bpf_bytes: bytes) -> None:
    rep = parse_structure(bpf_bytes)
    assert [s.name for s in rep.programs] == ["xdp/prog"]
    assert [s.name for s in rep.maps] == ["maps"]


def test_format_report_lists_programs_and_maps(bpf_bytes: bytes) -> None:
    text = format_report(parse_structure(bpf_bytes))
    assert text.startswith("ELF64 (little-endian) relocatable, machine bpf")
    assert "programs: 1" in text
    assert "xdp/prog (2 insns)" in text
    assert "maps: 1" in text
    assert "maps (20 bytes)" in text
    assert "license" in text


def test_big_endian_non_bpf(elf_builder) -> None:  # type: ignore[no-untyped-def]
    data = elf_builder(
        [(".text", 1, 0x6, bytes(8))], machine=62, e_type=2, big_endian=True
    )
    rep = parse_structure(data)
    assert rep.endian == "big"
    assert rep.machine == "x86-64"
    assert rep.type == "executable"
    assert [s.name for s in rep.sections][1] == ".text"
    assert "programs:" not in format_report(rep)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"hello world, not an object",
        b"\x7fELF" + bytes([3, 1, 1]) + bytes(9) + bytes(48),
        b"\x7fELF" + bytes([2, 7, 1]) + bytes(9) + bytes(48),
    ],
)
def test_rejects_non_elf(data: bytes) -> None:
    with pytest.raises(StructuralParseError):
        parse_structure(data)


def test_truncated_header(bpf_bytes: bytes) -> None:
    with pytest.raises(StructuralParseError, match="ELF header"):
        parse_structure(bpf_bytes[:40])


def test_truncated_section_table(bpf_bytes: bytes) -> None:
    with pytest.raises(StructuralParseError, match="section header"):
        parse_structure(bpf_bytes[:-10])


def test_read_structure_from_path(tmp_path: Path, bpf_bytes: bytes) -> None:
    p = tmp_path / "prog.o"
    p.write_bytes(bpf_bytes)
    assert read_structure(str(p)).is_bpf


def test_read_structure_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StructuralParseError):
        read_structure(str(tmp_path / "missing.o"))
