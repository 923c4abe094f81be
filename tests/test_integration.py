"""Integration tests for end-to-end workflows."""

from bazaar.cli.main import cli


def invoke(cli_runner, temp_db, user, *args):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "--user", user] + list(args))
    assert result.exit_code == 0, result.output
    return result


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: shop → listings → search → favorite → chat → refresh."""
    # Step 1: Seller opens a shop in Ташкент without delivery
    invoke(cli_runner, temp_db, "seller", "user", "create", "seller@example.com")
    invoke(
        cli_runner,
        temp_db,
        "seller",
        "shop",
        "create",
        "Parts Hub",
        "--address",
        "Ташкент, Чиланзар 5",
    )

    # Step 2: Two listings
    result = invoke(
        cli_runner,
        temp_db,
        "seller",
        "listing",
        "create",
        "Galaxy A52 screen",
        "--category",
        "Телефоны",
        "--price",
        "420000",
        "--quantity",
        "1",
    )
    screen_id = result.output.split("ID: ")[1].split(",")[0]
    invoke(
        cli_runner,
        temp_db,
        "seller",
        "listing",
        "create",
        "Galaxy A52 case",
        "--category",
        "Аксессуары",
        "--price",
        "35000",
        "--quantity",
        "0",
    )

    # Step 3: Buyer searches phones in stock
    result = invoke(
        cli_runner,
        temp_db,
        "buyer",
        "search",
        "galaxy",
        "--category",
        "Телефоны",
        "--availability",
        "inStock",
    )
    assert "Found 1 listing(s)" in result.output
    assert screen_id in result.output

    # Step 4: Nothing with delivery yet
    result = invoke(cli_runner, temp_db, "buyer", "search", "galaxy", "--delivery", "only")
    assert "No listings found." in result.output

    # Step 5: Favorite and ask the seller
    invoke(cli_runner, temp_db, "buyer", "favorite", "add", screen_id)
    result = invoke(cli_runner, temp_db, "buyer", "chat", "start", screen_id)
    chat_id = result.output.split("Chat ID: ")[1].strip()
    invoke(cli_runner, temp_db, "buyer", "chat", "send", chat_id, "Есть доставка?")

    result = invoke(cli_runner, temp_db, "seller", "chat", "list")
    assert chat_id in result.output

    # Step 6: Seller turns on delivery and refreshes listings
    result = invoke(
        cli_runner, temp_db, "seller", "shop", "update", "--delivery", "--refresh-listings"
    )
    assert "Refreshed 2 listing(s)" in result.output

    result = invoke(cli_runner, temp_db, "buyer", "search", "galaxy", "--delivery", "only")
    assert "Found 2 listing(s)" in result.output

    # Step 7: Favorites still resolve
    result = invoke(cli_runner, temp_db, "buyer", "favorite", "list")
    assert screen_id in result.output
