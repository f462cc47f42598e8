#!/usr/bin/env python3
"""
Volunteer Match command line.

    python main.py serve                 # run the API server
    python main.py init-db               # create tables
    python main.py seed demo.yaml        # load organizations, opportunities, volunteers
    python main.py rank --user-id 1      # print ranked matches for a volunteer
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict

import yaml

from web.backend.config import get_config
from database.database import create_db_engine, create_session_factory, init_db, session_scope
from database.repositories import OpportunityRepository, OrganizationRepository, VolunteerRepository
from core.matcher import rank_opportunities

logger = logging.getLogger(__name__)


def seed_database(session_factory, data: Dict[str, Any]) -> Dict[str, int]:
    """
    Load seed data in one transaction.

    Expected shape:
        organizations:
          - name: City Food Bank
            latitude: -23.55
            longitude: -46.63
            opportunities:
              - title: Weekend shift
                description: Sort donations
                required_skills: [logistics]
        volunteers:
          - user_id: 1
            skills: [logistics, driving]
            latitude: -23.56
            longitude: -46.64
    """
    counts = {'organizations': 0, 'opportunities': 0, 'volunteers': 0}

    with session_scope(session_factory) as session:
        organizations = OrganizationRepository(session)
        opportunities = OpportunityRepository(session)
        volunteers = VolunteerRepository(session)

        for org_data in data.get('organizations') or []:
            org_data = dict(org_data)
            opportunity_list = org_data.pop('opportunities', None) or []
            organization = organizations.create_organization(**org_data)
            counts['organizations'] += 1

            for op_data in opportunity_list:
                op_data = dict(op_data)
                status = op_data.pop('status', None)
                opportunity = opportunities.create_opportunity(organization, **op_data)
                if status:
                    opportunities.set_status(opportunity, status)
                counts['opportunities'] += 1

        for vol_data in data.get('volunteers') or []:
            volunteers.create_volunteer(**vol_data)
            counts['volunteers'] += 1

    return counts


def print_ranking(session_factory, user_id: int) -> int:
    with session_scope(session_factory) as session:
        profile = VolunteerRepository(session).get_volunteer_profile(user_id)
        if profile is None:
            logger.error(f"No volunteer profile for user {user_id}")
            return 1

        snapshot = OpportunityRepository(session).get_active_opportunities()
        resolver = OrganizationRepository(session).name_resolver(op.organization_id for op in snapshot)
        ranked = rank_opportunities(profile, snapshot, resolver)

    for result in ranked:
        print(json.dumps({
            'id': result.opportunity_id,
            'title': result.title,
            'match_score': result.score,
            'skill_compatibility': result.skill_compatibility,
            'distance_km': result.distance_km,
            'common_skills': result.common_skills,
            'organization': result.organization_name,
        }, ensure_ascii=False))
    print(f"total_matches: {len(ranked)}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Volunteer Match")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the API server")
    subparsers.add_parser("init-db", help="Create database tables")

    seed_parser = subparsers.add_parser("seed", help="Load seed data from a YAML file")
    seed_parser.add_argument("path", help="YAML file with organizations and volunteers")

    rank_parser = subparsers.add_parser("rank", help="Print ranked matches for a volunteer")
    rank_parser.add_argument("--user-id", type=int, required=True)

    args = parser.parse_args(argv)
    config = get_config()

    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format
    )

    if args.command == "serve":
        from web.backend.app import main as serve
        serve()
        return 0

    engine = create_db_engine(config.database.url)
    session_factory = create_session_factory(engine)

    if args.command == "init-db":
        init_db(engine)
        return 0

    if args.command == "seed":
        init_db(engine)
        with open(args.path, "r") as f:
            data = yaml.safe_load(f) or {}
        counts = seed_database(session_factory, data)
        logger.info(f"Seeded {counts}")
        return 0

    if args.command == "rank":
        return print_ranking(session_factory, args.user_id)

    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
