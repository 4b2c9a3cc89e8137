"""Main entry point for the Gantt Timeline Engine."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

import yaml

from gantt_timeline.engine import TaskStore, TimelineEngine
from gantt_timeline.errors import TimelineError
from gantt_timeline.evaluation import TaskGenerator, compare_projects
from gantt_timeline.models import load_tasks
from gantt_timeline.utils.config import load_config, get_default_config

logger = logging.getLogger("gantt_timeline")


def _load_config(config_path: str) -> dict:
    """Use the config file when present, defaults otherwise."""
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    return get_default_config()


def _write_view(view, results_dir: Path) -> Path:
    """Save the view as JSON plus a human-readable log."""
    results_dir.mkdir(exist_ok=True)
    stem = f"timeline_{view.project_id}_{view.granularity.value}"

    json_path = results_dir / f"{stem}.json"
    with open(json_path, 'w', encoding='utf-8') as f:
        json.dump(view.to_dict(), f, indent=2, default=str)

    log_path = results_dir / f"{stem}.log"
    with open(log_path, 'w', encoding='utf-8') as f:
        f.write(view.to_human_readable())

    return json_path


def run_schedule(args, config: dict):
    """Compute and save the timeline of one project."""
    if args.policy:
        config['critical_chain']['policy'] = args.policy
    engine = TimelineEngine(config)
    store = TaskStore(load_tasks(args.tasks), engine)

    project_ids = store.project_ids()
    project_id = args.project or (project_ids[0] if project_ids else None)
    if project_id is None:
        logger.info("No tasks in %s, using the default window", args.tasks)
    view = store.view(project_id, args.granularity)

    json_path = _write_view(view, Path(args.output))
    print(view.to_human_readable())
    print(f"\nTimeline saved to: {json_path}")
    return view


def run_reschedule(args, config: dict):
    """Move a task and print the updated layout of its project."""
    store = TaskStore(load_tasks(args.tasks), TimelineEngine(config))
    layouts = store.reschedule_task(args.task, args.start, args.end)

    print(f"Rescheduled {args.task} (version {store.version})")
    for layout in layouts:
        marker = '*' if layout.is_critical else ' '
        print(f"  {marker} {layout.task_id}: offset {layout.offset_fraction:.3f}, width {layout.width_fraction:.3f}")

    if args.save:
        with open(args.tasks, 'w', encoding='utf-8') as f:
            json.dump([task.to_dict() for task in store.tasks], f, indent=2, ensure_ascii=False)
        print(f"Tasks saved to: {args.tasks}")
    return layouts


def run_compare(args, config: dict):
    """Compare the default chain heuristic with the zero-float policy.

    Without --project every project in the file is compared.
    """
    store = TaskStore(load_tasks(args.tasks), TimelineEngine(config))
    project_ids = [args.project] if args.project else store.project_ids()
    comparisons = compare_projects(store.tasks, project_ids, config)

    results_dir = Path(args.output)
    results_dir.mkdir(exist_ok=True)
    for project_id, comparison in comparisons.items():
        print(f"Project {project_id}")
        print(comparison.to_human_readable())
        with open(results_dir / f"chain_comparison_{project_id}.json", 'w', encoding='utf-8') as f:
            json.dump(comparison.to_dict(), f, indent=2)

    if not comparisons:
        logger.warning("No projects to compare in %s", args.tasks)
    return comparisons


def run_generate(args, config: dict):
    """Write a synthetic task file."""
    generator = TaskGenerator(seed=args.seed, config=config)
    tasks = generator.generate_tasks(args.count, date.today())

    results_dir = Path(args.output)
    results_dir.mkdir(exist_ok=True)
    path = results_dir / "generated_tasks.json"
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([task.to_dict() for task in tasks], f, indent=2)

    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {path}")
    return tasks


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Gantt Timeline Engine"
    )
    parser.add_argument(
        'command',
        choices=['schedule', 'reschedule', 'compare', 'generate-tasks'],
        help='Command to run'
    )
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to configuration file (default: config.yaml)')
    parser.add_argument('--tasks', type=str, default='data/sample_tasks.json',
                        help='Task file, JSON or YAML (default: data/sample_tasks.json)')
    parser.add_argument('--project', type=str, help='Project id (default: first project in the file)')
    parser.add_argument('--granularity', choices=['month', 'week'], help='Header unit')
    parser.add_argument('--policy', choices=['first-predecessor', 'longest-path'],
                        help='Critical chain policy (default from config)')
    parser.add_argument('--task', type=str, help='Task id to reschedule')
    parser.add_argument('--start', type=str, help='New start date (YYYY-MM-DD)')
    parser.add_argument('--end', type=str, help='New end date (YYYY-MM-DD)')
    parser.add_argument('--save', action='store_true', help='Write rescheduled tasks back to --tasks')
    parser.add_argument('--count', type=int, default=20, help='Number of tasks to generate')
    parser.add_argument('--seed', type=int, default=42, help='Generator seed')
    parser.add_argument('--output', type=str, default='results', help='Results directory')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _load_config(args.config)
        if args.command == 'schedule':
            run_schedule(args, config)
        elif args.command == 'reschedule':
            if not (args.task and args.start and args.end):
                parser.error("reschedule requires --task, --start and --end")
            run_reschedule(args, config)
        elif args.command == 'compare':
            run_compare(args, config)
        elif args.command == 'generate-tasks':
            run_generate(args, config)
    except (TimelineError, FileNotFoundError, yaml.YAMLError, json.JSONDecodeError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
