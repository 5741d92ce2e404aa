"""Coverage Bounded Context.

Responsible for radio signal quality readings:
- Value Objects: SignalMeasurement, SignalLevel
- Ports: CellSignalStrength
- Services: levels_for_asu, dbm_for_asu, level_histogram
"""
