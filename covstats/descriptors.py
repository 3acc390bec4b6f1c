"""Parsing of dataset, raster and statistic descriptors."""

from __future__ import annotations

import re
from dataclasses import dataclass

_RESULT_NAME = re.compile(r"^(\w+)=", re.ASCII)
_FUNC_NAME = re.compile(r"=?(\w+)\(", re.ASCII)
_ARGS = re.compile(r"\(([,\w]+)\)\Z", re.ASCII)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass
class StatDescriptor:
    """A requested statistic: result name, value and weight rasters, stat."""

    name: str = ""
    values: str = ""
    weights: str = ""
    stat: str = ""


def parse_dataset_descriptor(descriptor: str) -> tuple[str, str]:
    """Split ``file[layer]`` into ``(file, layer)``; the layer defaults to ``"0"``."""
    if not descriptor:
        raise ValueError("Empty descriptor.")
    pos = descriptor.rfind("[")
    if pos == -1:
        return descriptor, "0"
    return descriptor[:pos], descriptor[pos + 1:len(descriptor) - 1]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"Invalid band number: {text!r}")
    return int(match.group(1))


def parse_raster_descriptor(descriptor: str) -> tuple[str, str, int]:
    """Split ``name:file[band]`` into ``(name, file, band)``.

    The name defaults to the file name and the band to 1.
    """
    if not descriptor:
        raise ValueError("Empty descriptor.")

    pos1 = descriptor.find(":")
    pos2 = descriptor.rfind("[")
    if pos1 != -1 and pos2 != -1 and pos2 < pos1:
        # A bracket before the colon belongs to the name.
        pos2 = -1

    name = descriptor[:pos1] if pos1 != -1 else ""

    if pos2 == -1:
        fname = descriptor[pos1 + 1:]
        band = 1
    else:
        fname = descriptor[pos1 + 1:pos2]
        band = _leading_int(descriptor[pos2 + 1:])

    if pos1 == -1:
        name = fname

    if not fname:
        raise ValueError("Descriptor has no filename.")

    return name, fname, band


def parse_stat_descriptor(descriptor: str) -> StatDescriptor:
    """Parse ``[name=]stat(values[,weights])`` into a :class:`StatDescriptor`."""
    if not descriptor:
        raise ValueError("Invalid stat descriptor.")

    ret = StatDescriptor()

    name_match = _RESULT_NAME.search(descriptor)
    if name_match:
        ret.name = name_match.group(1)

    func_match = _FUNC_NAME.search(descriptor)
    if func_match is None:
        raise ValueError("Invalid stat descriptor.")
    ret.stat = func_match.group(1)

    args_match = _ARGS.search(descriptor)
    if args_match is None:
        raise ValueError("Invalid stat descriptor.")
    values, sep, weights = args_match.group(1).partition(",")
    ret.values = values
    if sep:
        ret.weights = weights

    if not ret.name:
        parts = [ret.values, ret.stat]
        if ret.weights:
            parts.append(ret.weights)
        ret.name = "_".join(parts)

    return ret