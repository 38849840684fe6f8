"""Pipeline stages — design, placer, router.

Each stage consumes the previous stage's output.  The stages in order:

  design   — circuit description: components, terminals, connections
  placer   — assign an absolute offset to every component
  router   — walk one wire per connection across the shared board
"""
