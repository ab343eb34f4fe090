"""Angle constants shared by the math and graphics modules."""

PI = 3.1415926535
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI

__all__ = ["PI", "HALF_PI", "TWO_PI", "DEG_TO_RAD", "RAD_TO_DEG"]