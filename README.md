# asaogea

Building blocks for a small real-time engine, in plain Python: a frame
profiler, owned resources with checked handles, a shared reader/writer lock,
a frame timer, a thread-pool job system, input state tracking, a quaternion
camera and shader source definitions.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `asaogea.profiler`

- `Profiler.init()` creates (or replaces) the process-wide profiler and
  returns it; `Profiler.get()` returns it, raising `RuntimeError` if `init()`
  has not been called.
- `enable(True)` starts recording with an empty frame; `enable(False)` stops
  recording and drops the current frame.
- `record(name)` returns a `Record`. End it with `.end()` or use it as a
  context manager. Ending it stores a `RecordData` (`name`, `start`,
  `elapsed` in seconds, `duration()`) in the current frame, if recording is on.
  A record only counts the first time it is ended.
- `new_frame()` moves the current frame into the history and starts an empty
  one. It does nothing while recording is off.
- `current()` and `history()` return copies of the records. `clear()` empties
  the history and the current frame.
- `measure(name)` is a context manager that times its block with the global
  profiler.

```python
from asaogea.profiler import Profiler, measure

profiler = Profiler.init()
profiler.enable(True)
with measure("update"):
    ...
profiler.new_frame()
print(profiler.history()[-1][0].name)  # update
```

### `asaogea.resource`

- `Resource(value)` owns a value; `Resource()` is a null resource.
  `get()` returns the value. `take()` removes and returns it. `destroy()` drops it.
  `is_valid()` says whether it still holds a value. Calling `get()`,
  `take()`, `handle()` or `handle_mut()` on a null resource raises
  `ResourceDestroyedError`.
- `handle()` and `handle_mut()` return `ResourceHandle` and
  `ResourceHandleMut`. They are non-owning. Once the resource is taken or
  destroyed, their `is_valid()` is false and `get()` raises
  `ResourceDestroyedError`. `ResourceHandleMut.as_ref()` gives a
  `ResourceHandle` to the same resource.
- Resources and handles compare equal when both are valid and refer to the
  same resource.

### `asaogea.rwarc`

- `RwSLock(value)` is a readers-writer lock: many readers or one writer.
  Waiting writers are served before new readers. `read()` and `write()`
  return guards used as context manager. The protected data is on the guard's
  `value`, and a write guard may assign to it. If an exception escapes a write
  block, the lock is poisoned, and every later acquisition raises
  `LockPoisonedError`.
- `RwArc(value)` shares one such lock, with `read()` and `write()`.
  `downgrade()` returns an `RwWeak`, which upgrades back to an `RwArc`.
  `downgrade_read_only()` returns an `RwWeakReadOnly`, which upgrades to an
  `RwArcReadOnly` offering only `read()`. Upgrading after every owner is gone
  raises `ReferenceError`.

```python
from asaogea.rwarc import RwArc

shared = RwArc([1, 2])
with shared.write() as guard:
    guard.value.append(3)
with shared.downgrade_read_only().upgrade().read() as guard:
    print(guard.value)  # [1, 2, 3]
```

### `asaogea.time_delta`

`TimeDelta()` measures time between frames in seconds. `next()` records the
time since the previous call, or since creation. `delta_time()` returns it, and
is `0.0` before the first `next()`. A custom clock function may be passed in.

### `asaogea.jobs`

- `Job(callback)` wraps a callable with no arguments. `execute()` runs it once.
- `JobSystem(job_count)` starts `job_count` worker threads sharing a
  `JobPool`. `push(job)` queues a job and returns a `JobHandle`.
- `JobHandle.wait()` blocks until the job has run and returns its result. If
  the job raised, `wait()` raises the same exception. `get_ref()` returns the
  result without blocking, or `None` if there is none yet.
- `shutdown()`, also run when a `with` block ends, lets the workers finish
  the queued jobs and joins them. Pushing afterwards raises `RuntimeError`.
- `JobSystem.num_cpus()` returns the number of logical CPUs.
- `JobPool.pop()` raises `OutOfTaskError` when a waiter is woken with an
  empty queue, which is how `free()` stops workers.

```python
from asaogea.jobs import Job, JobSystem

with JobSystem(4) as jobs:
    handle = jobs.push(Job(lambda: 6 * 7))
    print(handle.wait())  # 42
```

### `asaogea.options`

Dataclasses with defaults:

- `RenderingOption(validation_layers=True, image_count=2)`
- `WindowOptions(name="Asaogea")`
- `Options(rendering=RenderingOption(), main_window=WindowOptions())`

### `asaogea.input_manager`

`InputManager.consume_event(event)` updates state from these events and ignores
any other object:

- `KeyboardInput(key, pressed)`
- `CursorMoved(x, y)`
- `MouseWheel(LineDelta(x, y))`, counted as 12 pixels per line
- `MouseWheel(PixelDelta(x, y))`
- `MouseInput(button, pressed)`, where `button` is a `MouseButton` or an integer

Query the state with `is_key_pressed`, `is_mouse_button_pressed`,
`mouse_position()` and `scroll_delta()`. Each returns a pair of floats where
that applies. `begin_frame()` resets the scroll delta to `(0.0, 0.0)`.

### `asaogea.camera`

- `Quat(x, y, z, w)` is a rotation quaternion; the default is the identity.
  `Quat.from_euler(order, a, b, c)` takes three axis letters, for example
  `"XYZ"` or `"XYX"`. `to_euler(order)` inverts it, `to_matrix()` gives the
  3x3 numpy matrix, and `*` composes rotations.
- `Camera()` has `set_position`, `set_rotation` and `set_rotation_euler` (XYZ
  angles), each returning the camera. It also has `position()`, `rotation()`
  and `euler()` (XYX angles). `matrix()` returns the 4x4 numpy view matrix,
  computed once and cached until the position or rotation changes. The matrix
  is a fixed base rotation times the camera rotation, applied after
  translating by minus the position.

### `asaogea.shaders`

- `IncludeHandler(search_paths=("./shaders/", "./"))`.
  `load_source(path)` returns the file's text, or `None` if it cannot be
  found or read. Absolute paths are read directly. Relative paths are looked
  up in each search path in turn.
- `ShaderFileDefinition(path, target_profile)` and
  `RawShaderDefinition(filename, target_profile, data)` describe a shader.
  Both have an entry point `"main"` by default, changed with
  `set_entry_point`, plus `file_name()` and `code(include_handler)`. For a
  file definition, `code` raises `ShaderSourceError` when the source cannot
  be loaded.
- `ShaderStage` lists `VERTEX`, `PIXEL` and `COMPUTE`.

## What this package does not do

- It does not compile shaders. The shader module only describes shaders and
  loads their source text; it produces no SPIR-V or other binaries.
- It opens no windows, runs no event loop and does no GPU rendering. Events
  for `InputManager` and frame ticks for `Profiler` and `TimeDelta` must come
  from the caller.