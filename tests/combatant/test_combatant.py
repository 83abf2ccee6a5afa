"""
Tests for the combatant model and its class-dispatched damage rule.
"""

import pytest
from battlesim.combatant import (
    Archer,
    AttackResult,
    Enemy,
    Mage,
    Warrior,
    create_combatant,
)
from battlesim.core.constants import CombatantClass, CombatantStatus
from battlesim.core.error_handling import UnknownClassError


@pytest.fixture
def dummy():
    """A sturdy enemy used as a punching bag."""
    return Enemy("Dummy", 1000, 1)


def test_new_combatant_state():
    """Test that a new combatant starts at full HP without attacks."""
    archer = Archer("Legolas", 40, 6)
    assert archer.name == "Legolas"
    assert archer.hp == 40
    assert archer.hp_max == 40
    assert archer.ap == 6
    assert archer.attack_count == 0
    assert archer.combatant_class == CombatantClass.ARCHER
    assert archer.is_alive()
    assert archer.status == CombatantStatus.ALIVE


def test_negative_starting_hp_is_clamped():
    """Test that a combatant never starts below 0 HP."""
    ghost = Enemy("Ghost", -5, 3)
    assert ghost.hp == 0
    assert not ghost.is_alive()
    assert ghost.status == CombatantStatus.DEFEATED


@pytest.mark.parametrize(
    "damage, expected_hp, expected_lost",
    [
        (0, 30, 0),
        (10, 20, 10),
        (30, 0, 30),
        (45, 0, 30),
        (-7, 30, 0),
    ],
)
def test_receive_damage(damage, expected_hp, expected_lost):
    """Test that HP decreases, floors at 0 and never heals."""
    goblin = Enemy("Goblin", 30, 4)
    assert goblin.receive_damage(damage) == expected_lost
    assert goblin.hp == expected_hp


def test_defeated_combatant_does_not_attack(dummy):
    """Test that attacking with a defeated combatant is a no-op."""
    fallen = Warrior("Fallen", 10, 5)
    fallen.receive_damage(10)
    assert fallen.attack(dummy) is None
    assert fallen.attack_count == 0
    assert dummy.hp == 1000


def test_attack_returns_result(dummy):
    """Test the result of a normal attack."""
    warrior = Warrior("Thor", 50, 5)
    result = warrior.attack(dummy)
    assert result == AttackResult(
        attacker="Thor",
        target="Dummy",
        attack_number=1,
        special=False,
        damage=5,
        target_hp_before=1000,
        target_hp_after=995,
    )


@pytest.mark.parametrize(
    "combatant, special",
    [
        (Archer("Legolas", 40, 6), 18),
        (Warrior("Thor", 50, 5), 20),
        (Enemy("Troll", 60, 3), 6),
    ],
)
def test_special_attack_every_third_attack(combatant, special, dummy):
    """Test that the third and sixth attacks use the class special."""
    damages = [combatant.attack(dummy).damage for _ in range(6)]
    ap = combatant.ap
    assert damages == [ap, ap, special, ap, ap, special]
    assert combatant.attack_count == 6


def test_special_attack_flags(dummy):
    """Test that only attack numbers divisible by three are special."""
    archer = Archer("Legolas", 40, 6)
    flags = [archer.attack(dummy).special for _ in range(9)]
    assert flags == [False, False, True] * 3


def test_mage_arcane_blast_uses_current_target_hp():
    """Test that Arcane Blast reads the target's HP at the moment of the attack."""
    mage = Mage("Gandalf", 100, 10)
    orc = Enemy("Orc", 80, 5)
    mage.attack(orc)
    mage.attack(orc)
    assert orc.hp == 60
    result = mage.attack(orc)
    assert result.special
    assert result.damage == 2 * 10 + 60 // 2
    assert orc.hp == 10


def test_mage_arcane_blast_truncates_odd_hp():
    """Test that half of an odd HP is rounded down."""
    mage = Mage("Merlin", 30, 1)
    target = Enemy("Rat", 7, 1)
    assert mage.special_damage(target) == 2 + 3


def test_special_names():
    """Test the name of every class special attack."""
    assert CombatantClass.ARCHER.special_name == "Triple Shot"
    assert CombatantClass.WARRIOR.special_name == "Crushing Blow"
    assert CombatantClass.MAGE.special_name == "Arcane Blast"
    assert CombatantClass.ENEMY.special_name == "Savage Strike"


def test_attack_routes_damage_through_receive_damage(mocker, dummy):
    """Test that the attack applies its damage with receive_damage."""
    archer = Archer("Legolas", 40, 6)
    spy = mocker.spy(dummy, "receive_damage")
    archer.attack(dummy)
    spy.assert_called_once_with(6)


def test_negative_ap_never_heals(dummy):
    """Test that an attack with negative AP leaves the target untouched."""
    weakling = Archer("Weakling", 10, -4)
    result = weakling.attack(dummy)
    assert result.damage == -4
    assert dummy.hp == 1000


@pytest.mark.parametrize(
    "class_name, expected_type",
    [
        ("Archer", Archer),
        ("Warrior", Warrior),
        ("Mage", Mage),
        ("Enemy", Enemy),
    ],
)
def test_create_combatant(class_name, expected_type):
    """Test that the factory builds the class named in the roster."""
    combatant = create_combatant(class_name, "Someone", 10, 2)
    assert type(combatant) is expected_type
    assert combatant.name == "Someone"
    assert combatant.hp == 10
    assert combatant.ap == 2


@pytest.mark.parametrize("class_name", ["Wizard", "archer", "ENEMY", ""])
def test_create_combatant_unknown_class(class_name):
    """Test that unknown or wrongly cased classes are rejected."""
    with pytest.raises(UnknownClassError) as excinfo:
        create_combatant(class_name, "Merlin", 30, 4)
    assert str(excinfo.value) == f"Unknown character type: {class_name}"
    assert excinfo.value.class_name == class_name


@pytest.mark.parametrize("combatant_class", list(CombatantClass))
def test_every_class_has_a_color(combatant_class):
    """Test that every class has its own color in the log markup."""
    color = combatant_class.color
    assert color
    assert combatant_class.colored_name == f"[{color}]{combatant_class.display_name}[/]"
