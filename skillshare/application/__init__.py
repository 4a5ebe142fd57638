"""
Application layer.

Use cases orchestrating the domain. Each use case receives the requester's
user id explicitly and talks to persistence through repository protocols.

This layer contains:
- Use Cases: one class per operation exposed to the request layer
- DTOs: plain data passed in and out of use cases
- Protocols: interfaces for the record store and the id generator
"""
