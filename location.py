import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union
import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float
    address: str

    @classmethod
    def from_json(cls, data: dict) -> "Location":
        return cls(lat=float(data["lat"]), lng=float(data["lng"]), address=str(data["address"]))

    def as_dict(self) -> Dict[str, Union[float, str]]:
        return {"lat": self.lat, "lng": self.lng, "address": self.address}


Observer = Callable[[Optional[Location]], None]


class Store:
    """Mutable cell that replays its current value to new subscribers.

    ``set`` notifies every current subscriber synchronously, in
    subscription order.
    """

    def __init__(self, value: Optional[Location] = None):
        self._value = value
        self._observers: List[Observer] = []

    @property
    def value(self) -> Optional[Location]:
        return self._value

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)
        observer(self._value)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def set(self, value: Optional[Location]):
        self._value = value
        # Copy so an observer may unsubscribe while being notified
        for observer in list(self._observers):
            observer(value)


class LocationState:
    """Holds the last resolved location, or None.

    ``resolve`` never raises: any failure is logged, recorded in
    ``last_error`` and leaves the cell empty. Concurrent resolves are not
    serialized; whichever finishes last wins, and that includes a resolve
    finishing after ``reset``.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self._store = Store()
        self.last_error: Optional[str] = None

    @property
    def value(self) -> Optional[Location]:
        return self._store.value

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self._store.subscribe(observer)

    async def resolve(self, lat: float, lng: float):
        try:
            response = await self._client.get(f"/api/geocode/{lat}/{lng}")
            if not response.is_success:
                raise ValueError(f"Geocode request failed with status {response.status_code}")
            location = Location.from_json(response.json())
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Failed to set location for {lat},{lng}: {e}")
            self.last_error = str(e)
            self._store.set(None)
            return

        self.last_error = None
        self._store.set(location)

    def reset(self):
        self.last_error = None
        self._store.set(None)
