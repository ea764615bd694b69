"""Source document editing gateway.

Import from submodules:
- abc: DocumentEditor
- types: DeleteLine, DeleteSpan, InsertLine, DocumentEdited
- real: FileDocumentEditor
- fake: FakeDocumentEditor
"""
