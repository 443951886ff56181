[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialcolor"
version = "0.1.0"
description = "Material Design colour utilities: CAM16 and HCT colour spaces, tonal palettes, blending and colour quantization"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "colour", "material", "hct", "cam16", "palette", "quantization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["materialcolor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
