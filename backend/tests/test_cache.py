from app.cache import Revalidator, workout_path

def test_revalidate_and_consume():
    r = Revalidator()
    r.revalidate_path("/dashboard")
    r.revalidate_path(workout_path("abc"))
    r.revalidate_path("/dashboard")

    assert r.is_stale("/dashboard")
    assert r.consume() == ["/dashboard", "/dashboard/workout/abc"]
    assert r.consume() == []
    assert not r.is_stale("/dashboard")

def test_clear_drops_only_the_recomputed_path():
    r = Revalidator()
    r.revalidate_path("/dashboard")
    r.revalidate_path(workout_path("abc"))

    assert r.clear(workout_path("abc")) is True
    assert r.clear(workout_path("abc")) is False
    assert r.consume() == ["/dashboard"]
