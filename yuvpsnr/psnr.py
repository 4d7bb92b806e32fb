"""Per-frame and average PSNR between two raw I420 (YUV 4:2:0 planar) files."""

from __future__ import annotations

import getopt
import math
import os
import re
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Sequence, TextIO

NORMAL_PSNR = 35
MAX_WIDTH = 8192
MAX_HEIGHT = 4320
PEAK = 255.0

DEFAULT_EACH_PSNR = "every_frame_psnr.txt"
DEFAULT_PSNR_RESULT = "average_psnr.txt"

_PROG = "yuvpsnr"


class PsnrError(Exception):
    """Raised when a PSNR comparison cannot be carried out."""


@dataclass(frozen=True)
class FramePsnr:
    """PSNR of the three planes of one frame."""

    index: int
    y: float
    u: float
    v: float


@dataclass(frozen=True)
class PsnrSummary:
    """Averages over all compared frames and the pass/fail verdict."""

    width: int
    height: int
    frame_count: int
    avg_y: float
    avg_u: float
    avg_v: float
    standard_psnr: float
    frames: tuple[FramePsnr, ...] = ()

    @property
    def passed(self) -> bool:
        """True unless some plane's average falls below the standard."""
        return not (
            self.avg_y < self.standard_psnr
            or self.avg_u < self.standard_psnr
            or self.avg_v < self.standard_psnr
        )


def plane_psnr(reference: bytes, distorted: bytes) -> float:
    """PSNR of two equally sized 8-bit planes; infinite when they are identical."""
    if len(reference) != len(distorted):
        raise ValueError("planes differ in size")
    if not reference:
        raise ValueError("planes are empty")
    total = sum((a - b) * (a - b) for a, b in zip(reference, distorted))
    mse = total / len(reference)
    if mse == 0:
        return math.inf
    return 10 * math.log10(PEAK * PEAK / mse)


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_plane_pair(reference: BinaryIO, distorted: BinaryIO, size: int):
    first = _read_up_to(reference, size)
    second = _read_up_to(distorted, size)
    if not first or not second or len(first) != len(second):
        return None
    return first.ljust(size, b"\0"), second.ljust(size, b"\0")


def iter_frame_psnr(
    reference: BinaryIO, distorted: BinaryIO, width: int, height: int
) -> Iterator[FramePsnr]:
    """Yield the PSNR of each complete frame the two streams have in common."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    size_y = width * height
    size_uv = ((width + 1) // 2) * ((height + 1) // 2)
    index = 0
    while True:
        psnrs = []
        for size in (size_y, size_uv, size_uv):
            planes = _read_plane_pair(reference, distorted, size)
            if planes is None:
                return
            psnrs.append(plane_psnr(*planes))
        yield FramePsnr(index, *psnrs)
        index += 1


def _average(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else math.nan


def summarize(
    frames: Iterable[FramePsnr], width: int, height: int, standard_psnr: float
) -> PsnrSummary:
    """Average the per-frame results."""
    collected = tuple(frames)
    return PsnrSummary(
        width=width,
        height=height,
        frame_count=len(collected),
        avg_y=_average([f.y for f in collected]),
        avg_u=_average([f.u for f in collected]),
        avg_v=_average([f.v for f in collected]),
        standard_psnr=standard_psnr,
        frames=collected,
    )


def _frame_line(frame: FramePsnr) -> str:
    return "frame %d, psnr\t%f\t%f\t%f\n" % (frame.index, frame.y, frame.u, frame.v)


def _open_or_report(stack: ExitStack, path, mode: str, report: TextIO, message: str):
    try:
        if "b" in mode:
            return stack.enter_context(open(path, mode))
        return stack.enter_context(open(path, mode, newline="\n"))
    except OSError as exc:
        print(message)
        report.write("open %s fail\n" % path)
        raise PsnrError("open %s fail" % path) from exc


def psnr_calculate(filename1, filename2, eachpsnr, psnrresult, width, height, standardpsnr):
    """Compare two I420 files, record per-frame PSNR and append the verdict."""
    with ExitStack() as stack:
        try:
            result = stack.enter_context(open(psnrresult, "a", newline="\n"))
        except OSError as exc:
            print("open result psnr fail")
            raise PsnrError("open result psnr fail") from exc
        reference = _open_or_report(stack, filename1, "rb", result, "open ref yuv fail")
        distorted = _open_or_report(stack, filename2, "rb", result, "open decode yuv fail")
        each = _open_or_report(stack, eachpsnr, "w", result, "open record psnr fail")

        frames = []
        for frame in iter_frame_psnr(reference, distorted, width, height):
            each.write(_frame_line(frame))
            frames.append(frame)
        summary = summarize(frames, width, height, standardpsnr)

        averages = (summary.avg_y, summary.avg_u, summary.avg_v)
        print(" %s: %f  %f  %f\n\n " % ((filename2,) + averages), end="")
        each.write("[%dx%d] frame = %d\n" % (width, height, summary.frame_count))
        each.write("Average of psnr  %f  %f  %f\n" % averages)
        video_file = str(filename2).rsplit("/", 1)[-1]
        verdict = "pass" if summary.passed else "fail"
        result.write(
            "%s: Y:%f  U:%f  V:%f    %s\n" % ((video_file,) + averages + (verdict,))
        )
    return summary


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _print_help(app: str) -> None:
    print("%s <options>" % app)
    print("   -i raw yuv file by software decoder")
    print("   -o raw yuv file by hardward decoder")
    print("   -W width  of video")
    print("   -H height of video")


def main(argv=None) -> int:
    """Command-line entry point; returns 0 on success and -1 on failure."""
    args = sys.argv[1:] if argv is None else list(argv)
    filename1 = filename2 = None
    width = height = 0
    standard_psnr = NORMAL_PSNR

    try:
        options, _ = getopt.gnu_getopt(args, "h:W:H:i:o:s:?")
    except getopt.GetoptError as exc:
        print(exc, file=sys.stderr)
        _print_help(_PROG)
        return 0
    for opt, value in options:
        if opt in ("-h", "-?"):
            _print_help(_PROG)
            return 0
        if opt == "-i":
            filename1 = value
        elif opt == "-o":
            filename2 = value
        elif opt == "-W":
            width = _atoi(value)
        elif opt == "-H":
            height = _atoi(value)
        elif opt == "-s":
            standard_psnr = _atoi(value)

    if not args:
        _print_help(_PROG)
        return -1
    if not filename1 or not filename2:
        print("no comparison media file specified", file=sys.stderr)
        return -1
    if width <= 0 or height <= 0 or width > MAX_WIDTH or height > MAX_HEIGHT:
        print("input width and height is invalid")
        return -1

    print(" filename1 %s\n filename2 %s\n result    %s " % (filename1, filename2, DEFAULT_PSNR_RESULT))
    try:
        psnr_calculate(
            filename1,
            filename2,
            DEFAULT_EACH_PSNR,
            DEFAULT_PSNR_RESULT,
            width,
            height,
            standard_psnr,
        )
    except PsnrError:
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())