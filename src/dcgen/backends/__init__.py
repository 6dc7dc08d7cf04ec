"""Backends for data contract output generation."""

from .yaml_generator import DEFAULT_CONTRACT_NAME, generate, save_contract_file

__all__ = ["DEFAULT_CONTRACT_NAME", "generate", "save_contract_file"]
