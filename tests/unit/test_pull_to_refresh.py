"""
Pull-to-refresh controller tests
"""
import asyncio

import pytest

from backend.gestures import (
    PullToRefreshController,
    ScrollContainer,
    TouchEvent,
    damped_pull_distance,
    indicator_opacity,
    indicator_rotation,
    indicator_offset
)
from backend.gestures.scroll_container import TOUCH_START, TOUCH_MOVE, TOUCH_END
from backend.models import RefreshOutcome


class RefreshSpy:
    """Async refresh action that counts calls"""

    def __init__(self, error=None, during=None):
        self.calls = 0
        self.error = error
        self.during = during

    async def __call__(self):
        self.calls += 1
        if self.during:
            self.during()
        await asyncio.sleep(0)
        if self.error:
            raise self.error


def fire(container, event_type, y=None):
    event = TouchEvent.at(y) if y is not None else TouchEvent()
    return asyncio.run(container.dispatch(event_type, event))


def end(controller):
    return asyncio.run(controller.handle_touch_end())


@pytest.fixture
def container():
    return ScrollContainer(scroll_top=0)


@pytest.fixture
def spy():
    return RefreshSpy()


@pytest.fixture
def controller(container, spy):
    ctrl = PullToRefreshController(spy, threshold=80, max_pull=120)
    ctrl.mount(container)
    yield ctrl
    ctrl.unmount()


class TestPullDistance:

    @pytest.mark.parametrize("delta,expected", [
        (0, 0),
        (-50, 0),
        (100, 50),
        (160, 80),
        (200, 100),
        (240, 120),
        (1000, 120),
    ])
    def test_damped_distance(self, delta, expected):
        assert damped_pull_distance(delta, 120) == expected

    def test_pull_arms_refresh_past_threshold(self, container, controller):
        fire(container, TOUCH_START, 100)
        event = fire(container, TOUCH_MOVE, 300)

        assert controller.pull_distance == 100
        assert controller.can_refresh is True
        assert event.default_prevented is True

    def test_pull_below_threshold_not_armed(self, container, controller):
        fire(container, TOUCH_START, 100)
        fire(container, TOUCH_MOVE, 200)

        assert controller.pull_distance == 50
        assert controller.can_refresh is False

    def test_exact_threshold_arms(self, container, controller):
        fire(container, TOUCH_START, 0)
        fire(container, TOUCH_MOVE, 160)

        assert controller.pull_distance == 80
        assert controller.can_refresh is True

    def test_pull_capped_at_max(self, container, controller):
        fire(container, TOUCH_START, 0)
        fire(container, TOUCH_MOVE, 900)

        assert controller.pull_distance == 120

    def test_upward_move_is_plain_scrolling(self, container, controller):
        fire(container, TOUCH_START, 300)
        event = fire(container, TOUCH_MOVE, 250)

        assert controller.pull_distance == 0
        assert controller.can_refresh is False
        assert event.default_prevented is False

    def test_move_after_content_scrolled_is_ignored(self, container, controller):
        fire(container, TOUCH_START, 100)
        container.scroll_top = 15
        event = fire(container, TOUCH_MOVE, 400)

        assert controller.pull_distance == 0
        assert event.default_prevented is False

    def test_start_below_top_is_ignored(self, container, controller, spy):
        container.scroll_top = 40
        fire(container, TOUCH_START, 100)
        container.scroll_top = 0
        fire(container, TOUCH_MOVE, 400)

        assert controller.is_pulling is False
        assert controller.pull_distance == 0
        assert end(controller) == RefreshOutcome.IGNORED
        assert spy.calls == 0

    def test_only_first_touch_is_tracked(self, container, controller):
        event = TouchEvent.at(100)
        event.touches.append(TouchEvent.at(0).first_touch)
        asyncio.run(container.dispatch(TOUCH_START, event))

        assert controller.state.start_y == 100


class TestRelease:

    def test_release_armed_refreshes_once(self, container, controller, spy):
        fire(container, TOUCH_START, 100)
        fire(container, TOUCH_MOVE, 300)

        assert end(controller) == RefreshOutcome.REFRESHED
        assert end(controller) == RefreshOutcome.IGNORED
        fire(container, TOUCH_END)

        assert spy.calls == 1

    def test_release_unarmed_does_not_refresh(self, container, controller, spy):
        fire(container, TOUCH_START, 100)
        fire(container, TOUCH_MOVE, 150)

        assert end(controller) == RefreshOutcome.NOT_ARMED
        assert spy.calls == 0

    @pytest.mark.parametrize("move_to", [150, 300, 1000])
    def test_state_reset_after_release(self, container, controller, move_to):
        fire(container, TOUCH_START, 100)
        fire(container, TOUCH_MOVE, move_to)
        end(controller)

        assert controller.pull_distance == 0
        assert controller.can_refresh is False
        assert controller.is_refreshing is False
        assert controller.is_pulling is False

    def test_failed_refresh_is_contained_and_resets(self, container):
        failing = RefreshSpy(error=RuntimeError("network down"))
        controller = PullToRefreshController(failing)

        with controller.attach(container):
            fire(container, TOUCH_START, 0)
            fire(container, TOUCH_MOVE, 400)
            outcome = end(controller)

        assert outcome == RefreshOutcome.FAILED
        assert failing.calls == 1
        assert controller.pull_distance == 0
        assert controller.can_refresh is False
        assert controller.is_refreshing is False

    def test_refreshing_flag_set_while_refresh_runs(self, container):
        seen = []
        controller = None

        def record():
            seen.append(controller.is_refreshing)

        controller = PullToRefreshController(RefreshSpy(during=record))
        with controller.attach(container):
            fire(container, TOUCH_START, 0)
            fire(container, TOUCH_MOVE, 400)
            end(controller)

        assert seen == [True]
        assert controller.is_refreshing is False

    def test_no_new_gesture_while_refreshing(self, container):
        observed = {}
        controller = None

        def try_new_gesture():
            controller.handle_touch_start(TouchEvent.at(10))
            controller.handle_touch_move(TouchEvent.at(500))
            observed['pulling'] = controller.is_pulling
            observed['start_y'] = controller.state.start_y

        spy = RefreshSpy(during=try_new_gesture)
        controller = PullToRefreshController(spy)
        with controller.attach(container):
            fire(container, TOUCH_START, 100)
            fire(container, TOUCH_MOVE, 400)
            end(controller)
            # The rejected touch left nothing to finish
            assert end(controller) == RefreshOutcome.IGNORED

        assert observed == {'pulling': False, 'start_y': 100}
        assert spy.calls == 1


class TestSubscription:

    def test_attach_registers_and_removes_listeners(self, container, spy):
        controller = PullToRefreshController(spy)

        with controller.attach(container):
            assert container.listener_count(TOUCH_START) == 1
            assert container.listener_count(TOUCH_MOVE) == 1
            assert container.listener_count(TOUCH_END) == 1

        assert container.listener_count() == 0
        assert controller.is_mounted is False

    def test_listeners_removed_when_block_raises(self, container, spy):
        controller = PullToRefreshController(spy)

        with pytest.raises(KeyError):
            with controller.attach(container):
                raise KeyError("boom")

        assert container.listener_count() == 0

    def test_unmounted_controller_ignores_events(self, container, spy):
        controller = PullToRefreshController(spy)
        with controller.attach(container):
            pass

        fire(container, TOUCH_START, 0)
        fire(container, TOUCH_MOVE, 400)
        fire(container, TOUCH_END)

        assert controller.pull_distance == 0
        assert spy.calls == 0

    def test_double_mount_rejected(self, container, controller):
        with pytest.raises(RuntimeError):
            controller.mount(ScrollContainer())

    @pytest.mark.parametrize("threshold,max_pull", [(0, 120), (80, 0), (-1, 120)])
    def test_invalid_configuration(self, spy, threshold, max_pull):
        with pytest.raises(ValueError):
            PullToRefreshController(spy, threshold=threshold, max_pull=max_pull)


class TestIndicator:

    def test_opacity(self):
        assert indicator_opacity(0, 80) == 0
        assert indicator_opacity(40, 80) == 0.5
        assert indicator_opacity(120, 80) == 1

    def test_rotation(self):
        assert indicator_rotation(40, 80) == 180
        assert indicator_rotation(80, 80) == 360
        assert indicator_rotation(120, 80) == 540
        assert indicator_rotation(120, 80, is_refreshing=True) == 0

    def test_offset(self):
        assert indicator_offset(0) == -40
        assert indicator_offset(100) == 60

    def test_indicator_snapshot(self, container, controller):
        fire(container, TOUCH_START, 0)
        fire(container, TOUCH_MOVE, 200)

        style = controller.indicator()
        assert style.opacity == 1
        assert style.rotation == 450
        assert style.content_offset == 100
        assert style.armed is True
        assert style.spinning is False


def test_controller_from_settings(spy):
    from backend.config import AppSettings

    controller = PullToRefreshController.from_settings(
        spy, AppSettings(pull_threshold=60, pull_max=90))

    assert controller.threshold == 60
    assert controller.max_pull == 90


class TestDrivenGesture:

    def test_pull_with_arming_travel_refreshes(self, controller, spy):
        assert controller.arming_travel == 160

        outcome = asyncio.run(controller.pull())

        assert outcome == RefreshOutcome.REFRESHED
        assert controller.last_outcome == RefreshOutcome.REFRESHED
        assert spy.calls == 1
        assert controller.pull_distance == 0

    def test_short_pull_not_armed(self, controller, spy):
        assert asyncio.run(controller.pull(100)) == RefreshOutcome.NOT_ARMED
        assert spy.calls == 0

    def test_drag_then_release(self, controller, spy):
        asyncio.run(controller.drag_to(100))
        asyncio.run(controller.drag_to(200))

        assert controller.is_pulling is True
        assert controller.indicator().armed is True

        assert asyncio.run(controller.release()) == RefreshOutcome.REFRESHED
        assert asyncio.run(controller.release()) == RefreshOutcome.IGNORED
        assert spy.calls == 1

    def test_failed_refresh_reported(self, container):
        ctrl = PullToRefreshController(RefreshSpy(error=RuntimeError("offline")))
        with ctrl.attach(container):
            assert asyncio.run(ctrl.pull()) == RefreshOutcome.FAILED
            assert ctrl.is_refreshing is False

    def test_pull_scrolled_content_ignored(self, container, controller, spy):
        container.scroll_top = 30

        assert asyncio.run(controller.pull()) == RefreshOutcome.IGNORED
        assert spy.calls == 0

    def test_unmounted_controller_cannot_be_driven(self, spy):
        ctrl = PullToRefreshController(spy)

        with pytest.raises(RuntimeError):
            asyncio.run(ctrl.pull())
