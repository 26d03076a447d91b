"""Basic tests for the LaunchSim car module."""

import pytest
import numpy as np

from launchsim.car.torque_curve import (
    TableTorqueCurve,
    PolynomialTorqueCurve,
    FunctionTorqueCurve,
)
from launchsim.car.engine import Engine, EngineConfig, LBFT_TO_NM
from launchsim.car.transmission import Transmission, TransmissionConfig
from launchsim.car.chassis import Chassis, ChassisConfig, DriveWheels, GRAVITY
from launchsim.car.car import Car, CarConfig
from launchsim.car.presets import (
    CarType,
    from_template,
    get_preset_config,
    audi_r8_torque,
    tesla_plaid_torque,
)


def _flat_engine(torque_lbft: float = 100.0) -> Engine:
    return Engine(EngineConfig(idle_rpm=1000, max_rpm=8000, torque_curve=lambda rpm: torque_lbft))


class TestTorqueCurve:
    """Test torque curve strategies."""

    def test_table_interpolates(self):
        """Test table curve interpolates between points."""
        curve = TableTorqueCurve([(1000, 200.0), (3000, 300.0)])
        assert curve.torque_at(2000) == pytest.approx(250.0)

    def test_table_holds_ends(self):
        """Test table curve holds end values outside its range."""
        curve = TableTorqueCurve([(3000, 300.0), (1000, 200.0)])
        assert curve.torque_at(500) == pytest.approx(200.0)
        assert curve.torque_at(9000) == pytest.approx(300.0)

    def test_table_needs_two_points(self):
        """Test a single point table is rejected."""
        with pytest.raises(ValueError):
            TableTorqueCurve([(1000, 200.0)])

    def test_polynomial(self):
        """Test polynomial curve evaluation."""
        curve = PolynomialTorqueCurve([0.0, 0.01, 100.0])
        assert curve.torque_at(1000) == pytest.approx(110.0)
        assert curve(1000) == pytest.approx(110.0)

    def test_function_curve(self):
        """Test callable adapter."""
        curve = FunctionTorqueCurve(lambda rpm: rpm / 10.0)
        assert curve.torque_at(2500) == pytest.approx(250.0)

    def test_peak(self):
        """Test sampled peak of the default table."""
        curve = EngineConfig().torque_curve
        rpm, torque = curve.peak(1000, 8700)
        assert abs(rpm - 6500) < 50
        assert torque == pytest.approx(400.0, abs=1.0)


class TestEngine:
    """Test engine component."""

    def test_engine_initialization(self):
        """Test engine starts at idle with no torque."""
        engine = Engine()
        assert engine.rpm == engine.config.idle_rpm
        assert engine.last_torque == 0.0

    def test_callable_curve_is_wrapped(self):
        """Test plain callables become torque curves."""
        config = EngineConfig(torque_curve=lambda rpm: 100.0)
        assert isinstance(config.torque_curve, FunctionTorqueCurve)

    def test_full_throttle_torque(self):
        """Test curve value is converted to Nm."""
        engine = _flat_engine(100.0)
        assert engine.get_torque(1.0) == pytest.approx(100.0 * LBFT_TO_NM)
        assert engine.last_torque == pytest.approx(100.0 * LBFT_TO_NM)

    def test_throttle_scales_torque(self):
        """Test half throttle gives half torque."""
        engine = _flat_engine(100.0)
        assert engine.get_torque(0.5) == pytest.approx(50.0 * LBFT_TO_NM)

    def test_throttle_out_of_range(self):
        """Test invalid throttle is rejected."""
        engine = _flat_engine()
        with pytest.raises(ValueError):
            engine.get_torque(1.5)
        with pytest.raises(ValueError):
            engine.get_torque(-0.1)

    def test_rpm_clamped(self):
        """Test RPM assignment clamps to the band."""
        engine = _flat_engine()
        engine.rpm = 20000
        assert engine.rpm == 8000
        assert engine.at_rev_limit
        engine.rpm = -50.0
        assert engine.rpm == 1000
        engine.rpm = 4321.9
        assert engine.rpm == 4321
        assert isinstance(engine.rpm, int)

    def test_invalid_rpm_band(self):
        """Test idle must be below max."""
        with pytest.raises(ValueError):
            EngineConfig(idle_rpm=8000, max_rpm=8000)

    def test_horsepower(self):
        """Test SAE horsepower formula."""
        engine = _flat_engine(100.0)
        engine.rpm = 5252
        torque = engine.get_torque(1.0)
        assert engine.get_horsepower(torque) == pytest.approx(100.0)

    def test_engine_state_is_read_only(self):
        """Test state snapshot does not re-evaluate torque."""
        engine = _flat_engine(100.0)
        engine.get_torque(0.5)
        engine.get_state()
        assert engine.last_torque == pytest.approx(50.0 * LBFT_TO_NM)


class TestTransmission:
    """Test transmission component."""

    def test_starts_in_first_forward_gear(self):
        """Test default table skips reverse and neutral."""
        trans = Transmission()
        assert trans.gear == 2
        assert trans.gear_label == "1"

    def test_table_without_neutral(self):
        """Test first forward gear when index 1 is already a drive gear."""
        trans = Transmission(TransmissionConfig(gear_ratios=[-3.0, 3.2, 2.1], diff_ratio=3.7))
        assert trans.gear == 1
        assert trans.max_gear == 2

    def test_explicit_initial_gear(self):
        """Test configured starting gear."""
        trans = Transmission(TransmissionConfig(initial_gear=1))
        assert trans.gear == 1
        assert trans.gear_label == "N"
        assert trans.get_ratio() == 0.0

    def test_invalid_initial_gear(self):
        """Test out-of-range starting gear is rejected."""
        with pytest.raises(ValueError):
            TransmissionConfig(gear_ratios=[-1.0, 0.0, 1.0], initial_gear=3)

    def test_get_ratio(self):
        """Test ratio includes the differential."""
        trans = Transmission()
        expected = trans.config.gear_ratios[trans.gear] * trans.config.diff_ratio
        assert trans.get_ratio() == expected

    def test_get_ratio_idempotent(self):
        """Test repeated ratio queries agree."""
        trans = Transmission()
        assert trans.get_ratio() == trans.get_ratio()

    def test_invalid_gear_raises(self):
        """Test a corrupted gear index fails loudly."""
        trans = Transmission()
        trans._gear = 99
        with pytest.raises(IndexError):
            trans.get_ratio()

    def test_shift_up(self):
        """Test upshift moves exactly one gear and stops at the top."""
        trans = Transmission()
        start = trans.gear
        assert trans.shift_up()
        assert trans.gear == start + 1

        trans.set_gear(trans.max_gear)
        assert not trans.shift_up()
        assert trans.gear == trans.max_gear

    def test_set_gear_rejects_out_of_range(self):
        """Test set_gear validation."""
        trans = Transmission()
        assert not trans.set_gear(-1)
        assert not trans.set_gear(trans.max_gear + 1)
        assert trans.set_gear(0)
        assert trans.gear_label == "R"

    def test_reset(self):
        """Test reset returns to the starting gear."""
        trans = Transmission()
        trans.set_gear(5)
        trans.reset()
        assert trans.gear == trans.first_forward_gear


class TestChassis:
    """Test chassis component."""

    def test_static_load(self):
        """Test static axle loads in newtons."""
        chassis = Chassis()
        weight = 1350.0 * GRAVITY
        assert chassis.static_load[0] == pytest.approx(weight * 0.45)
        assert chassis.static_load[1] == pytest.approx(weight * 0.55)

    def test_cg_height(self):
        """Test CG height from body height."""
        chassis = Chassis(ChassisConfig(ride_height_m=1.2))
        assert chassis.cg_height == pytest.approx(0.54)

    @pytest.mark.parametrize("drive, split, front_driven, rear_driven", [
        (DriveWheels.FRONT, (1.0, 0.0), True, False),
        (DriveWheels.REAR, (0.0, 1.0), False, True),
        (DriveWheels.ALL, (0.5, 0.5), True, True),
    ])
    def test_torque_distribution(self, drive, split, front_driven, rear_driven):
        """Test torque split follows the drive layout."""
        chassis = Chassis(ChassisConfig(drive_wheels=drive))
        assert chassis.torque_distribution == split
        assert sum(chassis.torque_distribution) == pytest.approx(1.0)
        assert chassis.front_wheels.is_drive_wheel == front_driven
        assert chassis.rear_wheels.is_drive_wheel == rear_driven

    def test_drive_wheels_from_string(self):
        """Test drive layout accepts its name."""
        config = ChassisConfig(drive_wheels="ALL")
        assert config.drive_wheels == DriveWheels.ALL

    def test_weight_transfer_under_acceleration(self):
        """Test forward force moves load rearward."""
        chassis = Chassis()
        front, rear = chassis.distribute_weight(5000.0)
        assert front < chassis.static_load[0]
        assert rear > chassis.static_load[1]
        assert front + rear == pytest.approx(sum(chassis.static_load))

    def test_weight_transfer_under_deceleration(self):
        """Test negative force moves load forward."""
        chassis = Chassis()
        front, rear = chassis.distribute_weight(-5000.0)
        assert front > chassis.static_load[0]
        assert rear < chassis.static_load[1]

    def test_weight_transfer_magnitude(self):
        """Test shift equals cg/wheelbase times force."""
        chassis = Chassis()
        front, _ = chassis.distribute_weight(1000.0)
        expected = chassis.static_load[0] - chassis.cg_height / chassis.wheel_base * 1000.0
        assert front == pytest.approx(expected)

    def test_weight_transfer_never_negative(self):
        """Test an axle cannot be loaded below zero."""
        chassis = Chassis()
        front, rear = chassis.distribute_weight(1e9)
        assert front == 0.0
        assert rear == pytest.approx(sum(chassis.static_load))

    def test_wheel_force_from_rest(self):
        """Test launch force is limited by what the torque can push."""
        chassis = Chassis()
        force = chassis.get_wheel_force(0.0, 1000.0, 0.0, 0.0001)
        assert force == pytest.approx(1000.0 / 0.33)
        assert chassis.front_wheels.traction_force == 0.0

    def test_driven_angular_velocity_averages(self):
        """Test AWD averages both axles."""
        chassis = Chassis(ChassisConfig(drive_wheels=DriveWheels.ALL))
        chassis.front_wheels._angular_velocity = 10.0
        chassis.rear_wheels._angular_velocity = 20.0
        assert chassis.get_driven_angular_velocity() == pytest.approx(15.0)

    def test_invalid_config(self):
        """Test chassis validation."""
        with pytest.raises(ValueError):
            ChassisConfig(front_weight_fraction=1.5)
        with pytest.raises(ValueError):
            ChassisConfig(wheel_mass_kg=0.0)


class TestCar:
    """Test complete car."""

    def test_car_initialization(self):
        """Test car starts at rest with mass from static loads."""
        car = Car()
        assert car.velocity == 0.0
        assert car.mass == pytest.approx(1350.0)
        assert car.engine.rpm == car.engine.idle_rpm

    def test_invalid_dt(self):
        """Test non-positive time step is rejected."""
        car = Car()
        with pytest.raises(ValueError):
            car.update(0.0)

    def test_single_update_moves_car(self):
        """Test one tick from rest produces forward motion."""
        car = Car()
        car.update(0.0001)
        assert car.velocity > 0.0
        assert car.drive_force > 0.0
        assert car.state.ticks == 1

    def test_rev_limiter_cuts_drive(self):
        """Test no drive force on the limiter."""
        car = Car()
        car.engine.rpm = car.engine.max_rpm
        car.update(0.0001)
        assert car.drive_force == 0.0
        assert car.velocity == 0.0

    def test_upshift_above_threshold(self):
        """Test gear increases when RPM exceeds the shift point."""
        car = Car()
        gear = car.transmission.gear
        car.engine.rpm = 8500
        car.update(0.0001)
        assert car.transmission.gear == gear + 1

    def test_no_upshift_past_top_gear(self):
        """Test the top gear is never exceeded."""
        car = Car()
        car.transmission.set_gear(car.transmission.max_gear)
        car.engine.rpm = 8500
        car.update(0.0001)
        assert car.transmission.gear == car.transmission.max_gear

    def test_resistances(self):
        """Test drag and rolling resistance formulas."""
        car = Car(CarConfig(drag_coefficient=0.3, rolling_resistance_coefficient=10.0))
        car.reset(velocity=20.0)
        car.update(0.0001)
        assert car.drag_force == pytest.approx(0.3 * 400.0)
        assert car.rolling_resistance_force == pytest.approx(200.0)

    def test_rolling_start(self):
        """Test rolling start spins the wheels up to road speed."""
        car = Car()
        car.reset(velocity=20.0)
        assert car.velocity == 20.0
        assert car.chassis.rear_wheels.angular_velocity == pytest.approx(20.0 / 0.33)
        assert car.engine.idle_rpm < car.engine.rpm < car.engine.max_rpm

    def test_telemetry(self):
        """Test telemetry contents and that reading it changes nothing."""
        car = Car()
        for _ in range(10):
            car.update(0.0001)
        velocity = car.velocity
        torque = car.engine.last_torque
        telemetry = car.get_telemetry()

        assert "state" in telemetry
        assert "engine" in telemetry
        assert "transmission" in telemetry
        assert "chassis" in telemetry
        assert telemetry["chassis"]["rear"]["is_drive_wheel"]
        assert car.velocity == velocity
        assert car.engine.last_torque == torque

    def test_invalid_config(self):
        """Test car validation."""
        with pytest.raises(ValueError):
            CarConfig(drivetrain_efficiency=0.0)
        with pytest.raises(ValueError):
            CarConfig(throttle=2.0)


class TestPresets:
    """Test car presets."""

    def test_audi_torque_fit(self):
        """Test Audi torque fit at idle."""
        assert audi_r8_torque(1000) == pytest.approx(270.0, abs=1.0)

    def test_tesla_torque_fit(self):
        """Test Tesla torque fit at low RPM."""
        assert tesla_plaid_torque(1000) == pytest.approx(1050.0, abs=2.0)

    def test_audi_preset(self):
        """Test Audi preset layout."""
        car = from_template(CarType.AUDI_R8)
        assert car.name == "audi-r8"
        assert car.mass == pytest.approx(1587.12)
        assert car.chassis.drive_wheels == DriveWheels.FRONT
        assert car.transmission.gear == 2
        assert car.transmission.max_gear == 8

    def test_tesla_preset(self):
        """Test Tesla preset layout."""
        car = from_template(CarType.TESLA_MODEL_S_PLAID)
        assert car.chassis.torque_distribution == (0.5, 0.5)
        assert car.transmission.gear == car.transmission.max_gear

    def test_preset_configs_are_fresh(self):
        """Test each call builds an independent config."""
        a = get_preset_config(CarType.AUDI_R8)
        b = get_preset_config(CarType.AUDI_R8)
        a.transmission.gear_ratios[2] = 9.9
        assert b.transmission.gear_ratios[2] == 3.133

    def test_from_name(self):
        """Test preset lookup by name."""
        assert CarType.from_name("Audi_R8") == CarType.AUDI_R8
        with pytest.raises(KeyError):
            CarType.from_name("model-t")

    def test_torque_curves_positive_in_band(self):
        """Test preset curves are usable over the whole RPM band."""
        for car_type in CarType:
            config = get_preset_config(car_type).engine
            rpms = np.linspace(config.idle_rpm, config.max_rpm, 50)
            assert np.all(config.torque_curve.sample(rpms) > 0.0)
