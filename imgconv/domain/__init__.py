"""
This package contains the domain models of imgconv.

Modules:
    exceptions.py: Defines the exception types for every failure the tool
                   reports, split into argument-resolution and conversion errors.
    job.py: Contains `ConversionJob`, the resolved description of a single
            conversion, and `ConversionResult`, what a finished conversion produced.
"""
