"""Link Bounded Context.

Responsible for the radio link between two endpoints:
- Value Objects: DistanceBand, DistanceSection, RangeResult, SignalEntry
- Entities: Endpoint, BandTable
- Services: max_distance, LinkRunner
"""
