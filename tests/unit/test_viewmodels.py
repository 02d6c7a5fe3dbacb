"""Tests for the observable base and the booking list view-model."""

import asyncio
from datetime import date
from decimal import Decimal

import httpx
import pytest

from moviegem.exceptions import BadServerResponseError, OperationNotSupportedError, RecordDecodeError
from moviegem.services.booking_service import InMemoryBookingService
from moviegem.viewmodels.base import ObservableViewModel
from moviegem.viewmodels.bookings import BookingListViewModel
from tests.factories import GatedBookingService, make_record

DAY = date(2025, 1, 20)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class StateRecorder:
    """Subscriber that snapshots (is_loading, item count, error) on every notification."""

    def __init__(self) -> None:
        self.states: list[tuple[bool, int, str | None]] = []

    def __call__(self, vm: BookingListViewModel) -> None:
        self.states.append((vm.is_loading, len(vm.items), vm.error))


# ---------------------------------------------------------------------------
# ObservableViewModel
# ---------------------------------------------------------------------------


class TestObservableViewModel:
    def test_notifies_subscribers_in_order(self) -> None:
        vm = ObservableViewModel()
        calls: list[str] = []
        vm.subscribe(lambda _: calls.append("first"))
        vm.subscribe(lambda _: calls.append("second"))
        vm.notify()
        assert calls == ["first", "second"]

    def test_unsubscribe_stops_notifications(self) -> None:
        vm = ObservableViewModel()
        calls: list[ObservableViewModel] = []
        unsubscribe = vm.subscribe(calls.append)
        unsubscribe()
        unsubscribe()
        vm.notify()
        assert calls == []

    def test_failing_subscriber_does_not_block_others(self) -> None:
        vm = ObservableViewModel()
        calls: list[ObservableViewModel] = []

        def broken(_: ObservableViewModel) -> None:
            raise RuntimeError("boom")

        vm.subscribe(broken)
        vm.subscribe(calls.append)
        vm.notify()
        assert calls == [vm]


# ---------------------------------------------------------------------------
# BookingListViewModel.load
# ---------------------------------------------------------------------------


class TestBookingListLoad:
    async def test_initial_state(self) -> None:
        vm = BookingListViewModel(InMemoryBookingService(), selected_date=DAY)
        assert vm.bookings == []
        assert vm.is_loading is False
        assert vm.error is None

    async def test_success_replaces_items(self) -> None:
        service = InMemoryBookingService([make_record()], date_format="%Y/%m/%d")
        vm = BookingListViewModel(service, selected_date=DAY)
        vm.items = [make_record(movie_name="Stale")]

        assert await vm.load() is True
        assert [r.movie_name for r in vm.bookings] == ["Demo"]
        assert vm.is_loading is False
        assert vm.error is None

    async def test_publishes_start_and_end_only(self) -> None:
        service = InMemoryBookingService([make_record()], date_format="%Y/%m/%d")
        vm = BookingListViewModel(service, selected_date=DAY)
        recorder = StateRecorder()
        vm.subscribe(recorder)

        await vm.load()

        assert recorder.states == [(True, 0, None), (False, 1, None)]

    async def test_second_load_while_pending_is_ignored(self) -> None:
        service = GatedBookingService([make_record()])
        vm = BookingListViewModel(service, selected_date=DAY)
        recorder = StateRecorder()
        vm.subscribe(recorder)

        first = asyncio.create_task(vm.load())
        await asyncio.sleep(0)
        assert vm.is_loading is True

        assert await vm.load() is False
        service.gate.set()
        assert await first is True

        assert service.fetch_calls == 1
        assert [state[0] for state in recorder.states] == [True, False]

    async def test_can_load_again_after_completion(self) -> None:
        service = GatedBookingService([make_record()])
        service.gate.set()
        vm = BookingListViewModel(service, selected_date=DAY)
        await vm.load()
        await vm.load()
        assert service.fetch_calls == 2

    @pytest.mark.parametrize(
        "error",
        [
            BadServerResponseError(500),
            RecordDecodeError("bad rows"),
            httpx.ConnectError("Connection refused"),
            httpx.ReadTimeout("Timeout"),
        ],
    )
    async def test_failure_sets_error_and_keeps_items(self, error: Exception) -> None:
        service = GatedBookingService()
        service.error = error
        service.gate.set()
        vm = BookingListViewModel(service, selected_date=DAY)
        previous = [make_record()]
        vm.items = previous

        await vm.load()

        assert vm.items == previous
        assert vm.is_loading is False
        assert isinstance(vm.error, str) and vm.error
        assert vm.last_exception is error

    async def test_error_cleared_when_next_load_starts(self) -> None:
        service = GatedBookingService()
        service.error = BadServerResponseError(500)
        service.gate.set()
        vm = BookingListViewModel(service, selected_date=DAY)
        await vm.load()
        assert vm.error is not None

        service.error = None
        await vm.load()
        assert vm.error is None

    async def test_select_date_loads_that_day(self) -> None:
        service = InMemoryBookingService(
            [make_record(), make_record(movie_name="Tomorrow", show_date="2025/01/21")],
            date_format="%Y/%m/%d",
        )
        vm = BookingListViewModel(service, selected_date=DAY)
        await vm.select_date(date(2025, 1, 21))
        assert [r.movie_name for r in vm.bookings] == ["Tomorrow"]

    async def test_select_date_while_pending_keeps_date(self) -> None:
        service = GatedBookingService([make_record()])
        vm = BookingListViewModel(service, selected_date=DAY)

        first = asyncio.create_task(vm.load())
        await asyncio.sleep(0)

        assert await vm.select_date(date(2025, 1, 21)) is False
        assert vm.selected_date == DAY

        service.gate.set()
        await first

        assert service.fetch_calls == 1
        assert service.fetched_days == [DAY]
        assert vm.selected_date == DAY
        assert [r.movie_name for r in vm.bookings] == ["Demo"]

    async def test_totals(self) -> None:
        vm = BookingListViewModel(InMemoryBookingService(), selected_date=DAY)
        vm.items = [
            make_record(number_of_tickets=2, total_amount="560"),
            make_record(number_of_tickets=1, total_amount="240.5"),
        ]
        assert vm.total_tickets == 3
        assert vm.total_revenue == Decimal("800.5")


# ---------------------------------------------------------------------------
# BookingListViewModel mutations
# ---------------------------------------------------------------------------


class TestBookingListMutations:
    def make_vm(self) -> BookingListViewModel:
        service = InMemoryBookingService([make_record()], date_format="%Y/%m/%d")
        return BookingListViewModel(service, selected_date=DAY)

    async def test_add_appends(self) -> None:
        vm = self.make_vm()
        await vm.load()
        await vm.add_booking(make_record(movie_name="New"))
        assert [r.movie_name for r in vm.bookings] == ["Demo", "New"]

    async def test_update_replaces_at_index_and_persists(self) -> None:
        vm = self.make_vm()
        await vm.load()
        await vm.update_booking(0, make_record(seats="C1,C2"))
        assert vm.bookings[0].seats == "C1,C2"

        await vm.load()
        assert vm.bookings[0].seats == "C1,C2"

    async def test_delete_removes_at_index_and_persists(self) -> None:
        vm = self.make_vm()
        await vm.load()
        await vm.delete_booking(0)
        assert vm.bookings == []

        await vm.load()
        assert vm.bookings == []

    async def test_update_bad_index_raises_index_error(self) -> None:
        vm = self.make_vm()
        with pytest.raises(IndexError):
            await vm.update_booking(3, make_record())

    async def test_failed_mutation_records_error_and_reraises(self) -> None:
        service = GatedBookingService()
        vm = BookingListViewModel(service, selected_date=DAY)
        vm.items = [make_record()]
        recorder = StateRecorder()
        vm.subscribe(recorder)

        with pytest.raises(OperationNotSupportedError):
            await vm.delete_booking(0)

        assert len(vm.items) == 1
        assert vm.error == "no deletes"
        assert recorder.states == [(False, 1, "no deletes")]

    async def test_failed_add_leaves_list_untouched(self) -> None:
        vm = BookingListViewModel(GatedBookingService(), selected_date=DAY)
        with pytest.raises(BadServerResponseError):
            await vm.add_booking(make_record())
        assert vm.items == []
