"""Current-user identity gateway.

Import from submodules:
- abc: IdentityProvider
- real: GitConfigIdentityProvider
- fake: FakeIdentityProvider
"""
