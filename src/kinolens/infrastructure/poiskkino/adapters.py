"""Adapters to convert Pydantic wire models to domain payloads."""

from __future__ import annotations

from typing import Iterable

from kinolens.domain.entities import catalog as domain
from kinolens.infrastructure.poiskkino import schema as wire


def _names(entries: Iterable[wire.NamedModel] | None) -> tuple[str, ...]:
    return tuple(e.name for e in entries or () if e.name)


def to_domain_image(model: wire.ImageModel | None) -> domain.Image | None:
    if model is None:
        return None
    return domain.Image(url=model.url, preview_url=model.preview_url)


def to_domain_external_ids(
    model: wire.ExternalIdModel | None,
) -> domain.ExternalIds | None:
    if model is None:
        return None
    return domain.ExternalIds(imdb=model.imdb, tmdb=model.tmdb, kp_hd=model.kp_hd)


def to_domain_rating(model: wire.RatingModel | None) -> domain.Rating | None:
    if model is None:
        return None
    return domain.Rating(
        kinopoisk=model.kinopoisk,
        imdb=model.imdb,
        tmdb=model.tmdb,
        film_critics=model.film_critics,
        russian_film_critics=model.russian_film_critics,
        awaited=model.await_,
    )


def to_domain_votes(model: wire.VotesModel | None) -> domain.Votes | None:
    if model is None:
        return None
    return domain.Votes(
        kp=model.kp,
        imdb=model.imdb,
        tmdb=model.tmdb,
        film_critics=model.film_critics,
        russian_film_critics=model.russian_film_critics,
        awaited=model.await_,
    )


def to_domain_person(model: wire.PersonModel) -> domain.Person:
    return domain.Person(
        id=model.id,
        name=model.name,
        en_name=model.en_name,
        photo=model.photo,
        description=model.description,
        profession=model.profession,
        en_profession=model.en_profession,
    )


def to_domain_video(model: wire.VideoModel) -> domain.Video:
    return domain.Video(url=model.url, site=model.site, name=model.name, type=model.type)


def to_domain_search_item(model: wire.SearchItemModel) -> domain.SearchItem:
    return domain.SearchItem(
        id=model.id,
        name=model.name,
        alternative_name=model.alternative_name,
        en_name=model.en_name,
        type=model.type,
        year=model.year,
        description=model.description,
        short_description=model.short_description,
        movie_length=model.movie_length,
        external_id=to_domain_external_ids(model.external_id),
        poster=to_domain_image(model.poster),
        backdrop=to_domain_image(model.backdrop),
        rating=to_domain_rating(model.rating),
        votes=to_domain_votes(model.votes),
        genres=_names(model.genres),
        countries=_names(model.countries),
        is_series=model.is_series,
        series_length=model.series_length,
        total_series_length=model.total_series_length,
    )


def to_domain_search_page(model: wire.SearchResponseModel) -> domain.SearchPage:
    """Convert a ``/movie/search`` response."""
    return domain.SearchPage(
        items=tuple(to_domain_search_item(d) for d in model.docs or ()),
        total=model.total,
        limit=model.limit,
        page=model.page,
        pages=model.pages,
    )


def to_domain_item_detail(model: wire.MovieModel) -> domain.ItemDetail:
    """Convert a ``/movie/{id}`` response."""
    trailers = model.videos.trailers if model.videos else None
    return domain.ItemDetail(
        id=model.id,
        name=model.name,
        en_name=model.en_name,
        alternative_name=model.alternative_name,
        type=model.type,
        year=model.year,
        description=model.description,
        short_description=model.short_description,
        slogan=model.slogan,
        rating=to_domain_rating(model.rating),
        votes=to_domain_votes(model.votes),
        external_id=to_domain_external_ids(model.external_id),
        poster=to_domain_image(model.poster),
        backdrop=to_domain_image(model.backdrop),
        genres=_names(model.genres),
        countries=_names(model.countries),
        persons=tuple(to_domain_person(p) for p in model.persons or ()),
        trailers=tuple(to_domain_video(v) for v in trailers or ()),
        seasons_info=tuple(
            domain.SeasonSummary(number=s.number, episodes_count=s.episodes_count)
            for s in model.seasons_info or ()
        ),
        movie_length=model.movie_length,
        series_length=model.series_length,
        total_series_length=model.total_series_length,
    )


def to_domain_episode(model: wire.EpisodeModel) -> domain.Episode:
    return domain.Episode(
        number=model.number,
        name=model.name,
        en_name=model.en_name,
        air_date=model.air_date,
        description=model.description,
        en_description=model.en_description,
        still=to_domain_image(model.still),
    )


def to_domain_season(model: wire.SeasonModel) -> domain.SeasonDetail:
    """Convert one record of a ``/season`` response."""
    return domain.SeasonDetail(
        movie_id=model.movie_id,
        number=model.number,
        episodes_count=model.episodes_count,
        episodes=tuple(to_domain_episode(e) for e in model.episodes or ()),
        poster=to_domain_image(model.poster),
        name=model.name,
        en_name=model.en_name,
        duration=model.duration,
        description=model.description,
        en_description=model.en_description,
        air_date=model.air_date,
    )
