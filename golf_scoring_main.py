"""
Main application for the golf scoring system.

Usage:
    python golf_scoring_main.py <round.yaml> [config.yaml]
"""

import logging
import sys

from config.config_manager import ConfigManager
from config.round_loader import RoundLoader
from ranking.leaderboard import RankingMetric
from ranking.ranking_processor import RankingProcessor
from reports.report_generator import ReportGenerator
from scoring.exceptions import ScoringValidationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(round_file: str, config_file: str = "config.yaml") -> None:
    """Main application entry point."""
    try:
        config = ConfigManager.load_config(config_file)
        logging.getLogger().setLevel(config['logging']['level'])
        logger.info("Starting golf scoring run...")

        round_data = RoundLoader.load_round(round_file)
        ranking_processor = RankingProcessor(config=config)
        report_generator = ReportGenerator(ranking_processor)

        stats = ranking_processor.get_round_statistics(round_data)
        logger.info(f"Round statistics: {stats}")

        leaderboard = ranking_processor.get_leaderboard(round_data, RankingMetric.STABLEFORD)
        for entry in leaderboard[:3]:
            logger.info(f"{entry.label:>4} {entry.name} {entry.value}")

        if round_data.matches:
            for result in ranking_processor.evaluate_matches(round_data):
                logger.info(f"Match {result.match_id}: {result.team_a_id} v {result.team_b_id} "
                            f"- {result.state.status_text}")

        report_results = report_generator.generate_all_reports(round_data)
        logger.info(f"Generated reports: {report_results}")

        logger.info("Golf scoring run completed successfully")

    except ScoringValidationError as e:
        logger.error(f"Invalid round data: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error in golf scoring run: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


def cli() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)
    main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else "config.yaml")


if __name__ == "__main__":
    cli()
