"""Services Layer — orchestration of core rules over injected infrastructure.

Invariants:
    - Services own their store and log; nothing else mutates them
    - Routes call services, never stores

Design Decisions:
    - Constructor injection over module-level state: isolated instances per test
"""
