from mudgame.models import Item, Player


def test_new_player_has_empty_inventory():
    player = Player(location="start")
    assert player.location == "start"
    assert player.inventory == ()


def test_inventory_keeps_pickup_order():
    player = Player(location="start")
    player.add_to_inventory(Item("sword"))
    player.add_to_inventory(Item("lamp"))
    assert [i.name for i in player.inventory] == ["sword", "lamp"]


def test_inventory_view_is_read_only():
    player = Player(location="start")
    player.add_to_inventory(Item("sword"))

    view = player.inventory
    assert isinstance(view, tuple)
    # Mutating a copy never reaches the player
    items = list(view)
    items.clear()
    assert len(player.inventory) == 1


def test_relocate_does_not_validate():
    player = Player(location="start")
    player.relocate("nowhere")
    assert player.location == "nowhere"


def test_initial_inventory_is_copied():
    seed = [Item("coin")]
    player = Player(location="start", inventory=seed)
    seed.append(Item("gem"))
    assert player.inventory == (Item("coin"),)
