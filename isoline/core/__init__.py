"""Internal implementation package for isoline; prefer the ``isoline`` facade."""
