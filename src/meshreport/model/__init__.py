"""
The MODEL layer contains the mesh data structures and the file parser.
It has NO knowledge of how the mesh is presented.
"""
