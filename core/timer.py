"""
Timer system for driving periodic work such as refreshing needs and autosaving.

Decay itself is lazy and does not depend on this loop; the timer only decides
how often the pet is brought up to date and written to disk while running.
"""

import asyncio
import inspect
import time
from dataclasses import dataclass
from typing import Callable, Optional, Dict

from loggers import SystemLogger

@dataclass
class TimedTask:
    """
    Represents a task that should be executed at specific intervals.
    
    Attributes:
        name: Unique identifier for the task
        interval: Time between executions in seconds
        callback: Sync or async function to execute
        condition: Optional function that must return True for execution
        last_run: Timestamp of last execution
        priority: Lower numbers run first
    """
    name: str
    interval: float
    callback: Callable
    condition: Optional[Callable] = None
    last_run: float = 0
    priority: int = 0

class TimerCoordinator:
    """
    Runs named tasks at their intervals inside one asyncio loop.
    """
    
    def __init__(self, resolution: float = 0.1):
        """
        Args:
            resolution: Seconds slept between scheduling passes.
        """
        self.tasks: Dict[str, TimedTask] = {}
        self.is_running: bool = False
        self.resolution = resolution
    
    def add_task(self, 
                 name: str, 
                 interval: float, 
                 callback: Callable, 
                 condition: Optional[Callable] = None,
                 priority: int = 0) -> None:
        """
        Add a new task using parameters.
        
        Args:
            name: Unique identifier for the task
            interval: Time between executions in seconds
            callback: Sync or async function to execute
            condition: Optional function that must return True for execution
            priority: Lower numbers run first
        """
        if name in self.tasks:
            raise ValueError(f"Task '{name}' already exists.")
        self.tasks[name] = TimedTask(
            name=name,
            interval=interval,
            callback=callback,
            condition=condition,
            priority=priority
        )
        SystemLogger.debug(f"Timer task added: {name} every {interval}s")
    
    def remove_task(self, task_name: str) -> None:
        if self.tasks.pop(task_name, None) is not None:
            SystemLogger.debug(f"Timer task removed: {task_name}")
    
    async def run(self) -> None:
        """
        Main loop for executing tasks at their specified intervals.
        
        Runs until stop() is called. Tasks run one after another in priority
        order, so a slow task delays the rest rather than overlapping them.
        """
        self.is_running = True
        
        while self.is_running:
            current_time = time.time()
            
            sorted_tasks = sorted(
                self.tasks.values(),
                key=lambda x: (x.priority, x.interval)
            )
            
            for task in sorted_tasks:
                if not self.is_running:
                    break
                if current_time - task.last_run >= task.interval:
                    if task.condition is None or task.condition():
                        await self._execute_task(task)
            
            await asyncio.sleep(self.resolution)
    
    async def _execute_task(self, task: TimedTask) -> None:
        """
        Execute a single task and update its last_run time.
        A failing task is logged and retried at its next interval.
        """
        try:
            result = task.callback()
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            SystemLogger.error(f"Timer task '{task.name}' failed: {type(e).__name__}: {e}")
        finally:
            task.last_run = time.time()
    
    def stop(self) -> None:
        """Stop the timer coordinator."""
        self.is_running = False
        SystemLogger.debug("Timer stopped")
