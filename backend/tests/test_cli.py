"""flask store ... commands."""


def test_say_prints_transaction(app, store):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["store", "say", "Rahim 100 taka baki"])

    assert result.exit_code == 0, result.output
    assert "baki-sale" in result.output
    assert "customer=Rahim" in result.output


def test_say_rejects_blank_text(app, store):
    result = app.test_cli_runner().invoke(args=["store", "say", "  "])
    assert result.exit_code != 0
    assert "Please enter or speak a command" in result.output


def test_seed_and_listings(app, empty_store):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["store", "seed"])
    assert result.exit_code == 0, result.output
    assert "5 products, 2 customers, 2 transactions" in result.output

    products = runner.invoke(args=["store", "products"]).output
    assert "Rice (Atta)" in products

    customers = runner.invoke(args=["store", "customers"]).output
    assert "Karim" in customers and "৳750" in customers

    feed = runner.invoke(args=["store", "feed", "--limit", "1"]).output
    assert feed.startswith("#")
    assert "baki-sale" not in feed
