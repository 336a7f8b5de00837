"""
The VIEW layer renders a parsed MeshDocument for people to read.
It only reads the document, never changes it.
"""
