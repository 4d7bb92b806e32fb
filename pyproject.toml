[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuvpsnr"
version = "1.0.0"
description = "Per-frame and average PSNR of raw planar YUV 4:2:0 video files"
requires-python = ">=3.10"
dependencies = []
keywords = ["psnr", "yuv", "i420", "video", "quality", "decoder"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yuvpsnr = "yuvpsnr.psnr:main"

[tool.hatch.build.targets.wheel]
packages = ["yuvpsnr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
