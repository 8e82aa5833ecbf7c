# Snake Duel Source Package
"""
Snake Duel - Player vs AI snake on a shared grid.

Modules:
- core: Abstract interfaces for move sources and renderers
- game: Grid geometry and collision oracle, snake model, match orchestration
- ai: AI strategies (easy, medium, hard) and the human input source
- utils: Configuration and logging setup
"""
