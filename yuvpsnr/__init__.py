"""PSNR comparison of raw planar YUV 4:2:0 video files; see yuvpsnr.psnr."""

__version__ = "1.0.0"
__all__ = ["__version__"]