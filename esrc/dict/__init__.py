"""
Dictionaries for ESRC: the intra-class variation dictionary, the
eigenface projection, and the combined frame [X D_I] with its class
structure.
"""
