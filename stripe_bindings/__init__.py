"""
Typed bindings for a payment-processing REST API.

Packages:
- shared: settings, base exceptions, open enumerations
- expandable: ID-or-object reference decoding
- params: request options and form encoding
- resources: customers, products, plans, SKUs, payment intents, subscriptions
- checkout: checkout sessions and their service
- client: transport interface, httpx transport, requestor
"""

__version__ = "0.1.0"
