"""The dining philosophers simulation, one thread per philosopher plus a monitor."""

import sys
import threading
import time
from dataclasses import dataclass, field


def time_now():
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Fork:
    """A fork on the table, guarded by a lock."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """A philosopher seated between two forks."""

    id: int
    left: Fork
    right: Fork
    simulation: "Simulation" = field(repr=False)
    meals: int = 0
    last_meal: int = 0

    def take_forks(self):
        """Pick up both forks; even and odd seats take them in opposite order."""
        first, second = (
            (self.left, self.right) if self.id % 2 == 0 else (self.right, self.left)
        )
        first.lock.acquire()
        self.simulation.log(self, "has taken a fork")
        second.lock.acquire()
        self.simulation.log(self, "has taken a fork")

    def eat(self):
        """Record a meal, eat for the configured time, then put both forks down."""
        simulation = self.simulation
        with simulation.meal_lock:
            self.last_meal = time_now()
            self.meals += 1
        simulation.log(self, "is eating")
        time.sleep(simulation.config.time_to_eat / 1000)
        self.left.lock.release()
        self.right.lock.release()

    def sleep(self):
        """Sleep for the configured time."""
        self.simulation.log(self, "is sleeping")
        time.sleep(self.simulation.config.time_to_sleep / 1000)

    def think(self):
        """Announce thinking."""
        self.simulation.log(self, "is thinking")

    def run(self):
        """Eat, sleep and think until the simulation stops or enough meals are eaten."""
        simulation = self.simulation
        required = simulation.config.meals
        while True:
            with simulation.print_lock:
                if simulation.stopped:
                    break
            self.take_forks()
            self.eat()
            self.sleep()
            self.think()
            if required is not None and self.meals == required:
                break


class Simulation:
    """A table of philosophers sharing forks, reporting events to a text stream."""

    def __init__(self, config, out=None):
        self.config = config
        self.out = out if out is not None else sys.stdout
        count = config.philosophers
        self.forks = [Fork(number + 1) for number in range(count)]
        self.philosophers = [
            Philosopher(number + 1, fork, self.forks[(number + 1) % count], self)
            for number, fork in enumerate(self.forks)
        ]
        self.print_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.stopped = False
        self.start_time = 0

    def _write(self, timestamp, philosopher_id, message):
        self.out.write(f"{timestamp} {philosopher_id} {message}\n")
        self.out.flush()

    def log(self, philosopher, message):
        """Write a timestamped event unless the simulation has already stopped."""
        with self.print_lock:
            if not self.stopped:
                self._write(time_now() - self.start_time, philosopher.id, message)

    def monitor(self):
        """Watch for starvation or for every philosopher having eaten enough."""
        config = self.config
        while True:
            all_ate = 0
            for philosopher in self.philosophers:
                with self.meal_lock:
                    last_meal = philosopher.last_meal
                    meals = philosopher.meals
                if time_now() - last_meal >= config.time_to_die:
                    with self.print_lock:
                        if not self.stopped:
                            self.stopped = True
                            self._write(
                                time_now() - self.start_time, philosopher.id, "died"
                            )
                    return
                if config.meals is not None and meals >= config.meals:
                    all_ate += 1
            if config.meals is not None and all_ate == len(self.philosophers):
                with self.print_lock:
                    self.stopped = True
                return
            time.sleep(0.0005)

    def run(self):
        """Start every philosopher and the monitor, and wait for them all."""
        self.start_time = time_now()
        threads = []
        for philosopher in self.philosophers:
            philosopher.last_meal = self.start_time
            thread = threading.Thread(
                target=philosopher.run, name=f"philosopher-{philosopher.id}"
            )
            thread.start()
            threads.append(thread)
            time.sleep(0.0001)
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        for thread in threads:
            thread.join()
        watcher.join()