"""
Example contract builder.

Builds a small customer contract through the FieldStore commands,
covering every optional part of the output: tags, title/description,
sensitivity flags, an enumeration and constraints.
"""
from dcgen.model import Sensitivity
from dcgen.store import FieldStore


def build_example_customer_contract() -> FieldStore:
    store = FieldStore()
    store.set_contract_name("CustomerContract")
    store.set_domain("sales")
    store.set_subdomain("crm")
    store.set_data_product_name("customers")

    store.add()
    store.update(0, name="customer_id", title="Customer ID", type="integer", required=True)

    store.add()
    store.update(
        1,
        name="email",
        description="Primary contact address",
        required=True,
        sensitive=Sensitivity(pii=True, phi=False),
        constraints={"max_length": 254, "format": "email"},
    )

    store.add()
    store.update(2, name="segment", sensitive=None)
    store.update_enumeration(2, "retail, business, public")

    store.add()
    store.update(3, name="signup_date", type="date", sensitive=None)

    return store


__all__ = ["build_example_customer_contract"]
