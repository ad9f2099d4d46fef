"""Implementation modules of the navdecomp pipeline (internal; import from ``navdecomp``)."""
