"""Space tree: the data model, its operations and its on-disk document.

Shape:
    root (Space, root=True)
    ├── items: [Item(name, description), ...]
    └── spaces:
        ├── child (Space)
        │   ├── items: [...]
        │   └── spaces: [...]
        └── ...

Every lookup is by exact name and returns the first depth-first pre-order
match; names are not required to be unique.
"""
