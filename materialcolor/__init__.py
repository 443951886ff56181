"""Material Design colour utilities: CAM16, HCT, tonal and core palettes, blending and quantization."""

__version__ = "0.1.0"