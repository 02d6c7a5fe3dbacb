"""Screen view-models: observable state plus the operations screens invoke."""

from moviegem.viewmodels.base import ListViewModel, LoadableViewModel, ObservableViewModel
from moviegem.viewmodels.bookings import BookingListViewModel
from moviegem.viewmodels.prices import PriceManagementViewModel
from moviegem.viewmodels.showtimes import ShowtimeManagementViewModel
from moviegem.viewmodels.theater_detail import TheaterDetailViewModel
from moviegem.viewmodels.theaters import TheaterManagementViewModel

__all__ = [
    "BookingListViewModel",
    "ListViewModel",
    "LoadableViewModel",
    "ObservableViewModel",
    "PriceManagementViewModel",
    "ShowtimeManagementViewModel",
    "TheaterDetailViewModel",
    "TheaterManagementViewModel",
]
