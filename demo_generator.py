#!/usr/bin/env python3
"""
Demo: Build a contract draft and generate the contract text.

Shows the draft snapshot (YAML) next to the generated contract.
"""

from dcgen.examples import build_example_customer_contract
from dcgen.backends import save_contract_file
from dcgen.serialization import store_to_yaml


def main():
    store = build_example_customer_contract()

    print("=" * 80)
    print("DATA CONTRACT GENERATOR DEMO")
    print("=" * 80)

    print("\nDRAFT SNAPSHOT:")
    print("-" * 80)
    print(store_to_yaml(store))

    print("GENERATED CONTRACT:")
    print("-" * 80)
    print(store.generate())

    filename = "customer_contract.yaml"
    save_contract_file(store.metadata, store.fields, filename)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
