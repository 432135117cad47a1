from nova_defense.models.missile import EnemyRocket, MissileManager, PlayerMissile, Projectile
from nova_defense.models.explosion import Explosion, ExplosionManager, ExplosionState
from nova_defense.models.city import City, CityManager
from nova_defense.models.defense import Battery, DefenseManager

__all__ = [
    "Projectile", "EnemyRocket", "PlayerMissile", "MissileManager",
    "Explosion", "ExplosionManager", "ExplosionState",
    "City", "CityManager",
    "Battery", "DefenseManager",
]
