from katana.particlepool import ParticlePool


class _Particle:
    def __init__(self, active):
        self.is_active = active


class _Updater:
    def __init__(self):
        self.calls = []

    def update(self, particle, game_time):
        self.calls.append((particle, game_time))


class _Renderer:
    def __init__(self):
        self.calls = []

    def draw(self, particle, sprite_batch):
        self.calls.append((particle, sprite_batch))


def _pool(*particles):
    updater, renderer = _Updater(), _Renderer()
    pool = ParticlePool(updater, renderer)
    for particle in particles:
        pool.add_particle(particle)
    return pool, updater, renderer


def test_update_touches_only_active_particles_in_order():
    first, idle, second = _Particle(True), _Particle(False), _Particle(True)
    pool, updater, _ = _pool(first, idle, second)
    clock = object()
    pool.update(clock)
    assert updater.calls == [(first, clock), (second, clock)]


def test_draw_touches_only_active_particles_in_order():
    idle, active = _Particle(False), _Particle(True)
    pool, _, renderer = _pool(idle, active)
    batch = object()
    pool.draw(batch)
    assert renderer.calls == [(active, batch)]


def test_get_inactive_particle_returns_first_inactive():
    active, idle_a, idle_b = _Particle(True), _Particle(False), _Particle(False)
    pool, _, _ = _pool(active, idle_a, idle_b)
    assert pool.get_inactive_particle() is idle_a


def test_get_inactive_particle_none_when_all_active():
    pool, _, _ = _pool(_Particle(True), _Particle(True))
    assert pool.get_inactive_particle() is None


def test_empty_pool_has_no_inactive_particle():
    pool, updater, renderer = _pool()
    pool.update(None)
    pool.draw(None)
    assert pool.get_inactive_particle() is None
    assert updater.calls == [] and renderer.calls == []


def test_reactivated_particle_is_updated():
    particle = _Particle(False)
    pool, updater, _ = _pool(particle)
    reused = pool.get_inactive_particle()
    reused.is_active = True
    pool.update("t")
    assert updater.calls == [(particle, "t")]
    assert pool.get_inactive_particle() is None