"""SSH infrastructure - key generation.

Import modules directly:
    from nsync.infrastructure.ssh.keys import ParamikoKeyFactory
"""

__all__: list[str] = []
