"""Manifests for the apps from OGS Games Viewer through Sports Standings."""

from __future__ import annotations

from .manifest import Manifest

_ENTRIES: tuple[dict[str, str], ...] = (
    dict(
        id="ogs-games-viewer",
        name="OGS Games Viewer",
        author="Neal Wright",
        summary="Shows OGS Games",
        desc=(
            "Shows a visualization of currently active Go games on OGS "
            "(Online Go Server) for a given user."
        ),
        file_name="ogs_games_viewer.star",
        package_name="ogsgamesviewer",
    ),
    dict(
        id="oh-highway-signs",
        name="OH Highway Signs",
        author="noahcolvin",
        summary="Displays OH highway signs",
        desc="Displays messages from overhead signs on Ohio highways.",
        file_name="oh_highway_signs.star",
        package_name="ohhighwaysigns",
    ),
    dict(
        id="pagerduty",
        name="PagerDuty",
        author="Nick Penree",
        summary="Show PagerDuty stats",
        desc="Show PagerDuty incident stats and on-call status.",
        file_name="pagerduty.star",
        package_name="pagerduty",
    ),
    dict(
        id="path-train-schedule",
        name="Path Schedule",
        author="Todd Greenberg",
        summary="Schedule for path train",
        desc=(
            "Shows train arrivals for upcoming inbound and outbound trains "
            "at path train stations."
        ),
        file_name="path_train_schedule.star",
        package_name="pathtrainschedule",
    ),
    dict(
        id="petpikachu",
        name="Pet Pikachu",
        author="Kyle Stark",
        summary="Virtual pet Pikachu",
        desc="Based on the Pokémon Pikachu virtual pet from the 90s.",
        file_name="petpikachu.star",
        package_name="petpikachu",
    ),
    dict(
        id="phase-of-moon",
        name="Phase Of Moon",
        author="Alan Fleming",
        summary="Shows the phase of the moon",
        desc="Shows the current phase of the moon.",
        file_name="phase_of_moon.star",
        package_name="phaseofmoon",
    ),
    dict(
        id="pokedex",
        name="Pokedex",
        author="Mack Ward",
        summary="Display a random Pokemon",
        desc=(
            "Display a random Pokemon alongside its name, number, height, "
            "and weight."
        ),
        file_name="pokedex.star",
        package_name="pokedex",
    ),
    dict(
        id="pollen-count",
        name="Pollen Count",
        author="Nicole Brooks",
        summary="Pollen count for your area",
        desc=(
            "Displays a pollen count for your area. Enter your location for "
            "updates every 12 hours on the current conditions in your town, "
            "as well as which types of pollen are in the air today."
        ),
        file_name="pollen_count.star",
        package_name="pollencount",
    ),
    dict(
        id="powerball",
        name="PowerBall",
        author="AmillionAir",
        summary="Shows Powerball Numbers",
        desc="Shows up to date powerball numbers and next drawing.",
        file_name="powerball.star",
        package_name="powerball",
    ),
    dict(
        id="precious-metals",
        name="Precious Metals",
        author="threeio",
        summary="Quotes on precious metals",
        desc="Quotes for gold, platinum and silver.",
        file_name="precious_metals.star",
        package_name="preciousmetals",
    ),
    dict(
        id="pubg-stats",
        name="PUBG Stats",
        author="joes-io",
        summary="Shows PUBG Player Stats",
        desc=(
            "Displays individual player's gaming stats from "
            "PlayerUnknown's Battlegrounds."
        ),
        file_name="pubg_stats.star",
        package_name="pubgstats",
    ),
    dict(
        id="purpleair",
        name="PurpleAir",
        author="posburn",
        summary="Displays local air quality",
        desc="Displays the local air quality index from a PurpleAir sensor.",
        file_name="purpleair.star",
        package_name="purpleair",
    ),
    dict(
        id="random-slackmoji",
        name="Random Slackmoji",
        author="btjones",
        summary="Displays a random Slackmoji",
        desc="Displays a random image from slackmojis.com!",
        file_name="random_slackmoji.star",
        package_name="randomslackmoji",
    ),
    dict(
        id="reddit-images",
        name="Reddit Images",
        author="Nicole Brooks",
        summary="Shuffle Subreddit Images",
        desc=(
            "Description: Show a random image post from a custom list of "
            "subreddits (up to 10) and/or a list of default subreddits. Use "
            "the ID displayed to access the post on a computer, at "
            "http://www.reddit.com/{id}. All fields are optional."
        ),
        file_name="reddit_images.star",
        package_name="redditimages",
    ),
    dict(
        id="reddit-r-place",
        name="Reddit R-Place",
        author="funkfinger",
        summary="Bits of r/place",
        desc="See tidbits of what Redditors created for r/place.",
        file_name="reddit_r_place.star",
        package_name="redditrplace",
    ),
    dict(
        id="sbb-timetable",
        name="SBB Timetable",
        author="LukiLeu",
        summary="SBB Timetable",
        desc=(
            "Shows a timetable for a station in the Swiss Public Transport "
            "network."
        ),
        file_name="sbb_timetable.star",
        package_name="sbbtimetable",
    ),
    dict(
        id="sf-next-muni",
        name="SF Next Muni",
        author="Martin Strauss",
        summary="SF Muni arrival times",
        desc=(
            "Shows the predicted arrival times from NextBus for a given "
            "SF Muni stop."
        ),
        file_name="sf_next_muni.star",
        package_name="sfnextmuni",
    ),
    dict(
        id="shopify-chart",
        name="Shopify Chart",
        author="kcharwood",
        summary="Display daily ecomm metrics",
        desc=(
            "Display daily Shopify metrics and charts for revenue, orders, "
            "or units."
        ),
        file_name="shopify_chart.star",
        package_name="shopifychart",
    ),
    dict(
        id="shuffle-images",
        name="Shuffle Images",
        author="rs7q5",
        summary="Randomly display an image",
        desc="Randomly displays an image from a user-specified list.",
        file_name="shuffle_images.star",
        package_name="shuffleimages",
    ),
    dict(
        id="snyk",
        name="Snyk",
        author="Andrew Powell",
        summary="Snyk project issue counts",
        desc=(
            "Shows medium/high/critical issue counts for the configured "
            "Snyk project."
        ),
        file_name="snyk.star",
        package_name="snyk",
    ),
    dict(
        id="sound-transit",
        name="Sound Transit",
        author="Jon Janzen",
        summary="Seattle light rail times",
        desc=(
            "Shows upcoming arrivals at up to 2 different stations in Sound "
            "Transit's Link light rail system in Seattle."
        ),
        file_name="sound_transit.star",
        package_name="soundtransit",
    ),
    dict(
        id="sports-rankings",
        name="Sports Rankings",
        author="Derek Holevinsky",
        summary="Shows rankings for sports",
        desc=(
            "Shows the AP poll rankings for various sports. Currently "
            "supports college football and men's and women's college "
            "basketball."
        ),
        file_name="sports_rankings.star",
        package_name="sportsrankings",
    ),
    dict(
        id="sports-scores",
        name="Sports Scores",
        author="rs7q5",
        summary="Get daily sports scores",
        desc=(
            "Get daily scores or live updates of sports. Scores for the "
            "previous day are shown until 11am EST."
        ),
        file_name="sports_scores.star",
        package_name="sportsscores",
    ),
    dict(
        id="sports-standings",
        name="Sports Standings",
        author="rs7q5",
        summary="Get sports standings",
        desc="Get various sports standings (data courtesy of ESPN).",
        file_name="sports_standings.star",
        package_name="sportsstandings",
    ),
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for this part of the catalog, ordered by package."""
    return [Manifest(**entry) for entry in _ENTRIES]