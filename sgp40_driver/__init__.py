"""Driver for the SGP40 VOC gas sensor on a Linux I2C bus."""

__version__ = "0.1.0"
__all__ = ["common", "hal", "i2c", "sgp40", "cli"]