# windrain

Building blocks for Eulerian wind-driven rain simulations, written with NumPy.
Functions take plain floats or NumPy arrays of cell or face values and return
new values.

## Install

    pip install .

and, to run the tests:

    pip install .[test]
    pytest

## Modules

- `windrain.properties`: air density and dynamic viscosity (`air_properties`)
  and water density (`water_density`), interpolated linearly from tables over
  temperature in kelvin; `fluid_properties` returns all three as a
  `FluidProperties`. Temperatures outside the tables raise `ValueError`.
  `cd_re` gives the drag product Cd*Re from the Gunn & Kinzer table,
  extrapolated from the end segments outside it.
- `windrain.droplet`: raindrop physics. `weber_number`, `ohnesorge_number`,
  `critical_weber`, `terminal_velocity`, `breakup_time_scale`,
  `deformation_drag_factor`, `collision_efficiency`,
  `coalescence_efficiency`, `evaporation_rate` (Ranz-Marshall) and
  `evaporation_heat_source`.
- `windrain.rain_phase`: `RainPhase`, one phase of drops of a given diameter
  carrying a share of the rainfall. It gives the drop Reynolds number
  (`reynolds`, `update_properties`), the turbulent dispersion
  (`dispersion`, returning a `TurbulentDispersion`), the implicit drag
  coefficient (`drag_factor`) and the specific catch ratio. `drag_cd_re` is
  a piecewise sphere drag correlation for Cd*Re.
- `windrain.boundary`: catch-ratio patches (`catch_ratio`,
  `CatchRatioPatch`) and rain inlet velocities (`rain_inlet_velocity`,
  `RainInletPatch`). The patch classes are built from and written back to
  plain dictionaries with `from_dict` and `to_dict`; `update` recomputes and
  stores the patch value.
- `windrain.timestep`: `courant_number` and `TimeStepControl`, whose
  `next_delta_t` grows the step by at most 20 % and caps it at
  `max_delta_t`.
- `windrain.solar`: Sun altitude and azimuth (`sun_angles`), angle folding
  (`correct_angle`), transformation into grid axes (`grid_transform`) and
  `SolarCalculator` with the `SunDirectionModel` and `SunLoadModel`
  choices; `correct_sun_direction` moves the Sun for the tracking model.
- `windrain.source`: `SemiImplicitTimeDependentSource`, a cell-set source
  S = f(t)*Su + Sp*x whose explicit part is scaled by an
  `InterpolationTable` (which can be loaded from a file of `(x y)` pairs),
  with `VolumeMode` and the helpers `volume_mode_from_word` and
  `volume_mode_to_word`.
- `windrain.catch`: `specific_catch_ratio` of one phase and
  `global_catch_ratio`, the specific ratios weighted by the phase fractions.

## Example

    import numpy as np
    from windrain.properties import fluid_properties, cd_re
    from windrain.droplet import terminal_velocity

    props = fluid_properties(293.15)        # temperature in kelvin
    re = np.array([1.0, 100.0, 4000.0])
    print(props, cd_re(re), terminal_velocity(0.001))

## What it does not do

There is no mesh, no finite-volume discretisation and no equation solver:
the momentum and volume-fraction equations of the rain phases are not solved
here, and no field files are read or written. There is no command-line
program; the package is used as a library by code that supplies the cell and
face values.