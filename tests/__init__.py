"""
charfun test suite

Tests for the complex log-gamma function, the characteristic function
families, the Poisson mixture series, the chunked linear combinator and the
shared infrastructure (configuration, exceptions, parameter broadcasting).
"""
