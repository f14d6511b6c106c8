"""Classic sorting algorithms, input generators, and time and memory benchmarks."""

__version__ = "0.1.0"
__all__ = ["sorting", "generators", "memory", "benchmark", "memprofile"]