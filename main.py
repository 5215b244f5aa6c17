import argparse
import asyncio
import pathlib
import sys


def _set_project_path() -> None:
    project_dir = pathlib.Path(__file__).resolve().parent
    omnidrive_parent_dir = project_dir / "src/python"
    sys.path.append(str(omnidrive_parent_dir))


if __name__ == "__main__":
    # Sets the project path so we can find the controls module.
    _set_project_path()
    parser = argparse.ArgumentParser(
        description="Drives a simulated omnidirectional base at a constant twist."
    )
    parser.add_argument("vx", type=float, help="Forward velocity in inches/s.")
    parser.add_argument("vy", type=float, help="Leftward velocity in inches/s.")
    parser.add_argument(
        "spin", type=float, help="Angular velocity in degrees/s, counterclockwise."
    )
    parser.add_argument("--duration", type=float, default=2.0, help="Seconds to run.")
    parser.add_argument(
        "--frequency", type=float, default=50.0, help="Control loop frequency in hz."
    )
    parser.add_argument(
        "--config", type=pathlib.Path, default=None, help="Drive config json file."
    )
    args = parser.parse_args()

    import geometry
    import session
    from controls import drive, drive_runner

    config = session.get_robot_config(file_path=args.config)
    omni_drive = drive.Drive(config, session.get_robot_motors(config))
    velocity = geometry.Velocity(geometry.BODY, args.vx, args.vy)
    target = geometry.Twist(velocity, args.spin)
    runner = drive_runner.DriveRunner(omni_drive, target, args.duration)
    try:
        twist = asyncio.run(runner.run(args.frequency))
        print(f"velocity={twist.velocity.format()} spin={twist.spin:.1f}°/s")
    except KeyboardInterrupt:
        # Prevent ^C or ^Z from being printed
        sys.stderr.write("\r")
