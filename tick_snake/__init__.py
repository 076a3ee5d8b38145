# Tick Snake Source Package
"""
Tick Snake - a wrap-around Snake game driven one tick at a time.

Modules:
- core: Abstract interfaces for games and renderers
- game: Simulation, game loop, key bindings, timing and rendering
- utils: Configuration loading
"""
