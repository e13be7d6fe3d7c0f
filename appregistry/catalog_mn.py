"""Manifests for the apps from MBTA through NYC Bus."""

from __future__ import annotations

from .manifest import Manifest

_ENTRIES: tuple[dict[str, str], ...] = (
    dict(
        id="mbta",
        name="MBTA",
        author="Marcus Better",
        summary="MBTA departures",
        desc="MBTA bus and rail departure times.",
        file_name="mbta.star",
        package_name="mbta",
    ),
    dict(
        id="mbta-new-trains",
        name="MBTA New Trains",
        author="joshspicer",
        summary="Track new MBTA subway cars",
        desc="Displays the real time location of the new MBTA subway cars.",
        file_name="mbta_new_trains.star",
        package_name="mbtanewtrains",
    ),
    dict(
        id="metar",
        name="METAR",
        author="Alexander Valys",
        summary="METAR text and flight rules",
        desc=(
            "Show METAR text for one airport or flight category "
            "(VFR/IFR/etc.) for up to 15 airports."
        ),
        file_name="metar.star",
        package_name="metar",
    ),
    dict(
        id="mind-the-gap",
        name="Mind The Gap",
        author="dinosaursrarr",
        summary="Tube platform simulator",
        desc="Important advice for Londoners to remember at all times.",
        file_name="mind_the_gap.star",
        package_name="mindthegap",
    ),
    dict(
        id="mlb-leaders",
        name="MLB Leaders",
        author="rs7q5",
        summary="Get MLB league leaders",
        desc=(
            "Get the top 2 (3 stats) or 3 (1 stat) league leaders "
            "in various MLB stats."
        ),
        file_name="mlb_leaders.star",
        package_name="mlbleaders",
    ),
    dict(
        id="mlb-scores",
        name="MLB Scores",
        author="cmarkham20",
        summary="Displays MLB scores",
        desc="Displays live and upcoming MLB scores from a data feed.",
        file_name="mlb_scores.star",
        package_name="mlbscores",
    ),
    dict(
        id="mls-scores",
        name="MLS Scores",
        author="cmarkham20",
        summary="Displays MLS scores",
        desc="Displays live and upcoming MLS scores from a data feed.",
        file_name="mls_scores.star",
        package_name="mlsscores",
    ),
    dict(
        id="mn-light-rail",
        name="MN Light Rail",
        author="Alex Miller",
        summary="Train Departure Times",
        desc="Shows Light Rail Departure Times from Selected Stop.",
        file_name="mn_light_rail.star",
        package_name="mnlightrail",
    ),
    dict(
        id="moretransit",
        name="MoreTransit",
        author="gdcolella",
        summary="See next transit arrivals",
        desc=(
            "See next transit arrivals from TransSee. Optimized for NYC "
            "Subway and more customizable than the default apps."
        ),
        file_name="moretransit.star",
        package_name="moretransit",
    ),
    dict(
        id="movie-quotes",
        name="Movie Quotes",
        author="Austin Fonacier",
        summary="Random Movie Quotes",
        desc="Random movie quote from AFI top 100 movie quotes.",
        file_name="movie_quotes.star",
        package_name="moviequotes",
    ),
    dict(
        id="natdex",
        name="National Pokedex",
        author="Lauren Kopac",
        summary="Display random Pokemon",
        desc="Display a random Pokemon from your region of choice.",
        file_name="natdex.star",
        package_name="natdex",
    ),
    dict(
        id="nationaltoday",
        name="NationalToday",
        author="rs7q5",
        summary="Get NationalToday holidays",
        desc="Displays today's holidays from NationalToday.",
        file_name="nationaltoday.star",
        package_name="nationaltoday",
    ),
    dict(
        id="nba-scores",
        name="NBA Scores",
        author="cmarkham20",
        summary="Displays NBA scores",
        desc="Displays live and upcoming NBA scores from a data feed.",
        file_name="nba_scores.star",
        package_name="nbascores",
    ),
    dict(
        id="near-earth-objs",
        name="Near Earth Objs",
        author="noahcolvin",
        summary="Show next near earth object",
        desc=(
            "Displays the name, speed, distance, and arrival of the next "
            "near Earth object from NeoWs."
        ),
        file_name="near_earth_objs.star",
        package_name="nearearthobjs",
    ),
    dict(
        id="netatmo",
        name="Netatmo",
        author="danmcclain",
        summary="Weather from your Netatmo",
        desc="Get your current weather from your Netatmo weather station.",
        file_name="netatmo.star",
        package_name="netatmo",
    ),
    dict(
        id="nfl-scores",
        name="NFL Scores",
        author="cmarkham20",
        summary="Displays NFL scores",
        desc="Displays live and upcoming NFL scores from a data feed.",
        file_name="nfl_scores.star",
        package_name="nflscores",
    ),
    dict(
        id="nft",
        name="NFT",
        author="nipterink",
        summary="Random Opensea NFT",
        desc="Displays a random NFT associated with an Ethereum public address.",
        file_name="nft.star",
        package_name="nft",
    ),
    dict(
        id="nhl-live",
        name="NHL Live",
        author="Reed Arneson",
        summary="Live updates of NHL games",
        desc="Displays live game stats or next scheduled NHL game information.",
        file_name="nhl_live.star",
        package_name="nhllive",
    ),
    dict(
        id="nhl-next-game",
        name="NHL Next Game",
        author="AKKanMan",
        summary="Gets Next Game Info",
        desc="Gets info on preferred NHL teams next game.",
        file_name="nhl_next_game.star",
        package_name="nhlnextgame",
    ),
    dict(
        id="nhl-scores",
        name="NHL Scores",
        author="cmarkham20",
        summary="Displays NHL scores",
        desc="Displays live and upcoming NHL scores from a data feed.",
        file_name="nhl_scores.star",
        package_name="nhlscores",
    ),
    dict(
        id="nightscout",
        name="Nightscout",
        author="Jeremy Tavener",
        summary="Shows Nightscout CGM Data",
        desc=(
            "Displays Continuous Glucose Monitoring (CGM) data from the "
            "Nightscout Open Source project (https://nightscout.github.io/)."
        ),
        file_name="nightscout.star",
        package_name="nightscout",
    ),
    dict(
        id="nixel-clock",
        name="Nixel Clock",
        author="Olly Stedall @saltedlolly",
        summary="A Pixel Nixie Clock",
        desc="Nixie Tube Clock + Pixels = Nixel Clock!",
        file_name="nixel_clock.star",
        package_name="nixelclock",
    ),
    dict(
        id="noaa-buoy",
        name="NOAA Buoy",
        author="tavdog",
        summary="Show buoy swell info",
        desc=(
            "Display swell data for user specified buoy. Find buoy_id's here "
            ": https://www.ndbc.noaa.gov/obs.shtml Buoy must have "
            "height,period,direction to display correctly."
        ),
        file_name="noaa_buoy.star",
        package_name="noaabuoy",
    ),
    dict(
        id="nyan-cat",
        name="Nyan Cat",
        author="Mack Ward",
        summary="Nyan Cat Animation",
        desc="An animated cartoon cat with a Pop-Tart for a torso.",
        file_name="nyan_cat.star",
        package_name="nyancat",
    ),
    dict(
        id="nyc-bus",
        name="NYC Bus",
        author="samandmoore",
        summary="NYC Bus departures",
        desc="Real time bus departures for your preferred stop.",
        file_name="nyc_bus.star",
        package_name="nycbus",
    ),
)


def manifests() -> list[Manifest]:
    """Return fresh manifests for this part of the catalog, ordered by package."""
    return [Manifest(**entry) for entry in _ENTRIES]