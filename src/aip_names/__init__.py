"""Typed resource name code generation for AIP resources.

The `aip_names` package generates Python types for the resource names
of APIs following the AIP resource model. For every resource it emits
a frozen pydantic model per name pattern and, for resources with
several patterns, a closed union dispatching between them.

Key features:
- descriptors from YAML files or `google.api.resource` annotations;
- deterministic output, safe to persist and diff;
- a protoc plugin and a command-line interface;
- a small runtime with the base model and recoverable parse errors.
"""
