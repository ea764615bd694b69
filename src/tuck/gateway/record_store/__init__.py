"""TODO record persistence gateway.

Import from submodules:
- abc: RecordStore, RecordLoad
- real: JsonRecordStore
- fake: FakeRecordStore
"""
