"""Shared test fixtures for the protoattrs test suite.

Available Fixtures
==================

Configuration (from tests/fixtures/config.py)
    - todo_config_yaml: protoattrs.yaml content overlaying the todo schema
    - todo_project: temp directory (cwd) containing that protoattrs.yaml

Registries (from tests/fixtures/registries.py)
    - emitter: CollectingEmitter
    - registry: InMemoryRegistry wired to ``emitter``
    - overlay: AttributeOverlay over ``registry``
"""
