# Copyright (c) 2025 Varshith Gudur. Licensed under AGPLv3.
# Field carrying an entity's identifying name
NAME_FIELD = "name"

# Relationship direction glyphs
UPSTREAM_GLYPH = "<"    # "<rel": target <rel source
DOWNSTREAM_GLYPH = ">"  # "rel>": source rel> target

# Parser configuration
STRICT_ENV_VAR = "ERMTOOLS_STRICT"
TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")
