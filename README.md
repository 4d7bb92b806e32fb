# yuvpsnr

Compare two raw planar YUV 4:2:0 (I420) video files frame by frame. For
each frame it computes the peak signal-to-noise ratio of the Y, U and V
planes. It then averages the values over all frames and decides pass or
fail against a threshold.

A common use is checking a hardware decoder's output against a software
reference decode.

## Installation

```
pip install .
```

## Command line

```
yuvpsnr -i reference.yuv -o decoded.yuv -W 1920 -H 1080 [-s 35]
```

Options:

- `-i`: the reference YUV file, for example from a software decoder
- `-o`: the YUV file under test, for example from a decoder being checked
- `-W`, `-H`: the frame width and height. These are required and must be
  positive, with a width of at most 8192 and a height of at most 4320.
- `-s`: the pass threshold in dB. The default is 35.

Numeric options are read like C's `atoi`: leading digits are used and
anything unreadable counts as 0.

The command writes two files in the current directory:

- `every_frame_psnr.txt` holds one line per frame, followed by the frame
  size, the frame count and the average PSNR. The file is overwritten on
  each run.
- `average_psnr.txt` gets one line appended per run. The line gives the
  base name of the file under test, the average Y, U and V PSNR, and
  `pass` or `fail`.

A run fails if any of the three averages is below the threshold. The
command returns -1 when no arguments are given, when either file is
missing from the options, when the size is out of range, or when a file
cannot be opened; otherwise it returns 0.

Comparison stops at the first plane where either file runs out of data or
where the two files yield different amounts of data, so only complete
frames that both files share are counted.

## Library use

Everything lives in `yuvpsnr.psnr`.

```python
from yuvpsnr.psnr import iter_frame_psnr, summarize

with open("ref.yuv", "rb") as ref, open("out.yuv", "rb") as out:
    frames = list(iter_frame_psnr(ref, out, 352, 288))

summary = summarize(frames, 352, 288, 35)
print(summary.avg_y, summary.avg_u, summary.avg_v, summary.passed)
```

- `plane_psnr(reference, distorted)` returns the PSNR of two equally
  sized byte strings. For identical planes the result is infinite. It
  raises `ValueError` for planes of different sizes or empty planes.
- `iter_frame_psnr(reference, distorted, width, height)` yields a
  `FramePsnr` (`index`, `y`, `u`, `v`) for each frame. It raises
  `ValueError` if the width or height is not positive.
- `summarize(frames, width, height, standard_psnr)` returns a
  `PsnrSummary` with `frame_count`, `avg_y`, `avg_u`, `avg_v`, the
  collected `frames` and a `passed` property. With no frames the averages
  are NaN.
- `psnr_calculate(filename1, filename2, eachpsnr, psnrresult, width,
  height, standardpsnr)` does the same work as the command, writes the
  per-frame file and appends the result line, and returns the
  `PsnrSummary`. It raises `PsnrError` when a file cannot be opened.
- `main(argv=None)` is the command itself.

## Limits

Only 8-bit I420 data is compared; other pixel layouts and bit depths are
not read. The output file names used by the command are fixed.