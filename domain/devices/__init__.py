"""Devices Bounded Context.

Responsible for knowing which antennas exist and how they are looked up:
- Value Objects: DeviceDefinition, DeviceKind
- Entities: DeviceCatalog
- Ports: DeviceRepository
"""
