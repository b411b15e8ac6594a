"""Wave-chart presentation helpers.

`codec` turns engine results into JSON-ready dictionaries for the API views;
`svg` renders the same geometry through the SVG template.
"""
