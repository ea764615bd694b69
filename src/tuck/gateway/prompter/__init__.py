"""User prompt gateway.

Import from submodules:
- abc: Prompter, Choice
- real: ClickPrompter
- fake: FakePrompter
"""
