"""Known hook events and the parameters gameplay passes with each.

Profiles may define templates for any subset of these; unknown names are still
accepted by ``fire_hook`` (custom events), this table only documents the
built-in ones for editors and the ``/api/hooks/catalog`` endpoint.
"""

HOOK_CATALOG = {
    # movement & exploration
    "onMove": ["x", "y", "direction"],
    "onTeleport": ["x", "y", "source"],
    "onChestOpen": ["x", "y", "loot"],
    "onSecretFound": ["x", "y", "direction"],
    "onRoomClear": ["roomId", "roomType", "x", "y"],
    "onZoneUnlock": ["zoneId", "zoneName"],
    "onExploreComplete": ["percentage"],
    "onFloorChange": ["floor"],
    # health
    "onDamage": ["amount", "source", "hp", "maxHp"],
    "onHeal": ["amount", "source", "hp", "maxHp"],
    "onPlayerDeath": ["source"],
    # inventory & equipment
    "onItemAdd": ["item", "count", "total"],
    "onItemRemove": ["item", "count", "total"],
    "onEquip": ["itemId", "name", "slot", "attack", "defense"],
    "onUnequip": ["itemId", "name", "slot"],
    "onEquipmentFound": ["itemId", "name", "slot", "rarity"],
    # enemies
    "onEnemyMove": ["minionId", "x", "y", "state"],
    "onMinionAlert": ["minionId", "x", "y", "alertLevel"],
    # combat
    "onTurnStart": ["turn"],
    "onAttack": ["attacker"],
    "onDefend": ["defender"],
    "onPlayerHit": ["damage"],
    "onEnemyHit": ["enemy", "damage"],
    "onWin": [],
    "onLose": [],
    # objectives & progression
    "onObjectiveProgress": ["objectiveId", "current", "target"],
    "onObjectiveComplete": ["objectiveId"],
    "onAllObjectivesComplete": [],
    "onStatUpdate": ["statName", "value"],
    "onXpGain": ["amount", "source", "totalXp", "level"],
    "onLevelUp": ["newLevel", "skillPointsAvailable", "stats"],
    "onSkillLearn": ["skillId", "skillName", "rank", "tree"],
    "onSkillUse": ["skillId", "skillName", "rank", "effect"],
    "onQuestComplete": ["questId", "questName"],
    "onQuestProgression": ["questId", "step", "totalSteps"],
}


def is_known_hook(name: str) -> bool:
    return name in HOOK_CATALOG


__all__ = ["HOOK_CATALOG", "is_known_hook"]
