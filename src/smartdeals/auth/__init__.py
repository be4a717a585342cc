"""Authentication and authorization.

Learn: Users sign in with the external identity provider, which hands
the browser a signed ID token. The API never sees passwords; it only
verifies tokens (verifier.py) and enforces record ownership
(dependencies.py). Only the bid listing is gated today.
"""
