# UI module
