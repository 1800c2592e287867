"""Example consumer repository against SQLite."""

from servicebase.domain.models.paging import Page
from servicebase.infrastructure.persistence.models.examples import NavigationClass
from servicebase.infrastructure.persistence.repositories import get_repositories


async def test_get_many_by_navigation_class_id_orders_and_includes(session, navigation, add_examples):
    await add_examples(navigation[0], ["gamma", "alpha", "beta"])
    await add_examples(navigation[1], ["other"])
    session.expunge_all()

    rows = await get_repositories(session).examples.get_many_by_navigation_class_id(navigation[0].id)

    assert [r.name for r in rows] == ["alpha", "beta", "gamma"]
    assert all(r.navigation_class.name == "primary" for r in rows)


async def test_get_page_by_navigation_class_id(session, navigation, add_examples):
    names = [f"ex{i:02d}" for i in range(50)]
    await add_examples(navigation[0], list(reversed(names)))

    page = await get_repositories(session).examples.get_page_by_navigation_class_id(
        navigation[0].id, Page(page_number=3, page_size=15)
    )

    assert page.total_rows == 50
    assert [r.name for r in page.rows] == names[30:45]


async def test_get_page_by_navigation_class_id_defaults_to_first_page(session, navigation, add_examples):
    await add_examples(navigation[0], [f"ex{i:02d}" for i in range(12)])
    page = await get_repositories(session).examples.get_page_by_navigation_class_id(navigation[0].id)
    assert (page.page_number, page.page_size, len(page.rows)) == (1, 10, 10)


async def test_navigation_repository_create_and_delete(session):
    repos = get_repositories(session)
    nav = NavigationClass(name="temp")
    assert await repos.navigation.create(nav)
    assert await repos.navigation.delete(nav.id)
    assert await repos.navigation.get_by_id(nav.id) is None
