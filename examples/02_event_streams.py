from __future__ import annotations

from _infra import FakeSensor, Reading, banner

from tinycps import CPS, adapt as A, merge


@A.lifted
def fahrenheit(reading: Reading, on_value, on_fault) -> None:
    if reading.celsius < -273.15:
        on_fault(f"{reading.sensor_id}: below absolute zero")
    else:
        on_value(reading.celsius * 9 / 5 + 32)


def main() -> None:
    banner("02_event_streams: merge + flat_map + lift")

    north = FakeSensor("north", script=[10.0, 12.0])
    south = FakeSensor("south", script=[-500.0, 14.0])

    both = CPS(merge(north, south))
    both.flat_map(fahrenheit)(
        lambda f: print(f"{f:.1f}F"),
        lambda fault: print(f"fault: {fault}"),
    )

    # latest north reading paired with latest south reading
    spread = CPS.lift(lambda n, s: round(n.celsius - s.celsius, 1))(north, south)
    spread(lambda delta: print(f"north - south: {delta}"), print)


if __name__ == "__main__":
    main()
