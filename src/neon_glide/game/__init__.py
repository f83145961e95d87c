"""Game package: re-export the simulation types for simpler imports.

    from neon_glide.game import GameSession, GamePhase
"""

from .entities import Player, Obstacle, Particle, IdCounter
from .collision import collides, first_collision, rects_overlap
from .integrator import integrate_player, integrate_obstacles, integrate_particles
from .particles import ParticleBuffer, ParticleEngine
from .spawner import Difficulty, Spawner
from .persistence import JsonBestScoreStore, MemoryBestScoreStore
from .session import GamePhase, GameSession

__all__ = [
    "Player",
    "Obstacle",
    "Particle",
    "IdCounter",
    "collides",
    "first_collision",
    "rects_overlap",
    "integrate_player",
    "integrate_obstacles",
    "integrate_particles",
    "ParticleBuffer",
    "ParticleEngine",
    "Difficulty",
    "Spawner",
    "JsonBestScoreStore",
    "MemoryBestScoreStore",
    "GamePhase",
    "GameSession",
]
