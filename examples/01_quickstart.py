from __future__ import annotations

from _infra import FakeSensor, banner

from tinycps import CPS, adapt as A


def main() -> None:
    banner("01_quickstart: wrap + filter + map + scan")

    sensor = FakeSensor("t-1", script=[21.5, None, 22.0, -300.0, 23.5])

    running_max = (
        CPS(sensor)
        .filter(lambda reading: reading.celsius > -273.15)
        .map(lambda reading: reading.celsius)
        .scan(max)(float("-inf"))
    )

    running_max(
        lambda t: print(f"max so far: {t}"),
        lambda fault: print(f"fault: {fault}"),
    )

    # first emission as a kungfu Result
    print(A.to_result(CPS(sensor).map(lambda reading: reading.celsius)))


if __name__ == "__main__":
    main()
