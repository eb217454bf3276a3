"""Test suite for the aip-names package.

This package contains unit and integration tests validating pattern
parsing, naming, code generation, descriptor loading, the command line
and the protoc plugin, as well as the behavior of generated modules.
"""
