"""Initial datasets loaded into the store at startup."""

from typing import Dict, List

from app.features.auth.models import JournalEntry, User
from app.features.claims.models import ClaimRequest, DocumentVerification, EmailVerification
from app.features.clinics.models import City, Clinic, Contact, Tier, Treatment
from app.features.content.models import BlogPost, ProductReview
from app.features.newsletter.models import NewsletterSubscriber
from app.features.reviews.models import Review
from app.features.submissions.models import ListingSubmission


TREATMENTS = [
    (1, "FUE", "Follicular Unit Extraction: individual grafts harvested with a micro-punch."),
    (2, "FUT", "Follicular Unit Transplantation: a strip of donor scalp is dissected into grafts."),
    (3, "DHI", "Direct Hair Implantation with a Choi implanter pen, no recipient incisions."),
    (4, "PRP Therapy", "Platelet-rich plasma injections to support graft survival and thinning hair."),
    (5, "Beard Transplant", "Grafts placed along the beard and moustache line."),
    (6, "Eyebrow Transplant", "Single-hair grafts to rebuild eyebrow density and shape."),
]

CITIES = [
    ("Istanbul", "Turkey", "https://images.transplantify.example.com/cities/istanbul.jpg"),
    ("Bangkok", "Thailand", "https://images.transplantify.example.com/cities/bangkok.jpg"),
    ("Budapest", "Hungary", "https://images.transplantify.example.com/cities/budapest.jpg"),
    ("Mexico City", "Mexico", "https://images.transplantify.example.com/cities/mexico-city.jpg"),
]


def _clinics() -> List[Clinic]:
    return [
        Clinic(
            id=1,
            name="Bosphorus Hair Institute",
            tier=Tier.GOLD,
            city="Istanbul",
            country="Turkey",
            address="Halaskargazi Cd. 48, Sisli, Istanbul",
            latitude=41.0574,
            longitude=28.9870,
            rating=4.8,
            review_count=2,
            short_description="Sapphire FUE and DHI with all-inclusive packages.",
            long_description=(
                "Founded in 2009, the institute performs over 2,000 procedures a year. "
                "Packages include hotel, transfers and a dedicated interpreter."
            ),
            treatments=[1, 3, 4],
            contact=Contact(phone="+90 212 555 0148", website="https://bosphorushair.example.com"),
            reviews=[
                Review(
                    id=101,
                    user_id="user-patient-1",
                    clinic_id=1,
                    rating=5,
                    comment="Natural hairline, excellent aftercare. 8 months in and very happy.",
                    date="2024-03-02",
                    status="approved",
                ),
                Review(
                    id=102,
                    user_id="user-patient-2",
                    clinic_id=1,
                    rating=5,
                    comment="Professional from pickup to follow-up calls.",
                    date="2024-01-18",
                    status="approved",
                    is_anonymous=True,
                ),
            ],
            image_url="https://images.transplantify.example.com/clinics/bosphorus.jpg",
            gallery_images=[
                "https://images.transplantify.example.com/clinics/bosphorus-1.jpg",
                "https://images.transplantify.example.com/clinics/bosphorus-2.jpg",
            ],
            video_url="https://video.transplantify.example.com/bosphorus-tour.mp4",
            verified=True,
            owner_id="user-owner-1",
            subscription_status="active",
            billing_customer_id="cus_seedbosphorus01",
            aggregated_rating=4.7,
            aggregated_review_count=1312,
            review_source="Trustpilot",
            review_source_url="https://www.trustpilot.com/review/bosphorushair.example.com",
        ),
        Clinic(
            id=2,
            name="Siam Follicle Centre",
            tier=Tier.PREMIUM,
            city="Bangkok",
            country="Thailand",
            address="88 Sukhumvit Soi 11, Khlong Toei, Bangkok",
            latitude=13.7436,
            longitude=100.5563,
            rating=4.6,
            review_count=1,
            short_description="Physician-performed FUE and FUT with long-term graft tracking.",
            long_description="A surgeon-led practice focused on high-density frontal restorations.",
            treatments=[1, 2, 5],
            contact=Contact(phone="+66 2 555 0190", website="https://siamfollicle.example.com"),
            reviews=[
                Review(
                    id=103,
                    user_id="user-patient-1",
                    clinic_id=2,
                    rating=4,
                    comment="Great surgeon, the waiting area was crowded.",
                    date="2023-11-20",
                    status="approved",
                ),
            ],
            image_url="https://images.transplantify.example.com/clinics/siam.jpg",
            gallery_images=["https://images.transplantify.example.com/clinics/siam-1.jpg"],
            verified=True,
            subscription_status="active",
            billing_customer_id="cus_seedsiam000002",
        ),
        Clinic(
            id=3,
            name="Danube Trichology Clinic",
            tier=Tier.BASIC,
            city="Budapest",
            country="Hungary",
            address="Andrassy ut 61, Budapest",
            latitude=47.5059,
            longitude=19.0656,
            short_description="EU-accredited clinic offering FUE and PRP.",
            long_description="Small private clinic with two operating theatres.",
            treatments=[1, 4],
            contact=Contact(phone="+36 1 555 0133", website="https://danubetrich.example.com"),
            image_url="https://images.transplantify.example.com/clinics/danube.jpg",
        ),
        Clinic(
            id=4,
            name="Clinica Capilar Reforma",
            tier=Tier.BASIC,
            city="Mexico City",
            country="Mexico",
            address="Paseo de la Reforma 222, Juarez, CDMX",
            short_description="Beard and eyebrow specialists.",
            long_description="Micro-graft specialists for facial hair restoration.",
            treatments=[5, 6],
            contact=Contact(phone="+52 55 5555 0104", website="https://capilarreforma.example.com"),
            image_url="https://images.transplantify.example.com/clinics/reforma.jpg",
        ),
    ]


def _users() -> List[User]:
    return [
        User(id="user-admin", name="Site Admin", email="admin@transplantify.example.com", role="admin"),
        User(
            id="user-owner-1",
            name="Emre Kaya",
            email="emre@bosphorushair.example.com",
            role="clinic-owner",
        ),
        User(
            id="user-patient-1",
            name="Daniel Brooks",
            email="daniel.brooks@example.com",
            role="patient",
            favorite_clinics=[1, 2],
            journey={
                "preOp": JournalEntry(
                    date="2023-07-01",
                    notes="Norwood 3, booked for 3,000 grafts.",
                    image_url="https://images.transplantify.example.com/journeys/daniel-preop.jpg",
                ),
            },
        ),
        User(id="user-patient-2", name="Sofia Marin", email="sofia.marin@example.com", role="patient"),
    ]


def build_seed() -> Dict[str, list]:
    """Build a fresh set of seed records, keyed by store collection name."""
    return {
        "treatments": [Treatment(id=i, name=n, description=d) for i, n, d in TREATMENTS],
        "cities": [City(name=n, country=c, image_url=u) for n, c, u in CITIES],
        "clinics": _clinics(),
        "users": _users(),
        "blog_posts": [
            BlogPost(
                id=201,
                title="FUE vs. DHI: Which Technique Fits Your Hair Loss?",
                author="Dr. Lena Hoffmann",
                date="2024-02-12",
                summary="How the two most requested techniques differ in recovery, density and cost.",
                content="Both techniques harvest individual follicular units...",
                image_url="https://images.transplantify.example.com/blog/fue-vs-dhi.jpg",
            ),
            BlogPost(
                id=202,
                title="Your First 12 Months After a Hair Transplant",
                author="Transplantify Editorial",
                date="2024-01-05",
                summary="Shedding, the ugly duckling phase, and when to expect final results.",
                content="Most patients notice shock loss between weeks two and six...",
                image_url="https://images.transplantify.example.com/blog/first-year.jpg",
            ),
        ],
        "product_reviews": [
            ProductReview(
                id=301,
                name="Minoxidil 5% Foam",
                rating=4.5,
                summary="The most studied topical for maintaining native hair.",
                full_review="Once-daily foam, less scalp irritation than the solution...",
                affiliate_link="https://shop.example.com/minoxidil-foam?ref=transplantify",
                image_url="https://images.transplantify.example.com/products/minoxidil.jpg",
                category_id=1,
            ),
            ProductReview(
                id=302,
                name="Ketoconazole 2% Shampoo",
                rating=4.0,
                summary="Anti-fungal shampoo with mild anti-androgenic effect.",
                full_review="Used twice weekly it reduces scalp inflammation...",
                affiliate_link="https://shop.example.com/keto-shampoo?ref=transplantify",
                image_url="https://images.transplantify.example.com/products/keto.jpg",
                category_id=2,
            ),
        ],
        "pending_claims": [
            ClaimRequest(
                id=401,
                clinic_id=3,
                clinic_name="Danube Trichology Clinic",
                submitter_name="Dr. Anna Szabo",
                submitter_title="Medical Director",
                submitter_email="anna.szabo@danubetrich.example.com",
                verification=EmailVerification(),
            ),
            ClaimRequest(
                id=402,
                clinic_id=4,
                clinic_name="Clinica Capilar Reforma",
                submitter_name="Luis Herrera",
                submitter_title="Practice Manager",
                submitter_email="luis@capilarreforma.example.com",
                verification=DocumentVerification(
                    document_proof="https://docs.transplantify.example.com/claims/402-license.pdf"
                ),
            ),
        ],
        "pending_reviews": [
            Review(
                id=501,
                user_id="user-patient-2",
                clinic_id=2,
                rating=5,
                comment="Six months post-op and the density is better than I hoped.",
                date="2024-03-10",
                status="pending",
            ),
        ],
        "pending_submissions": [
            ListingSubmission(
                id=601,
                clinic_name="Aegean Hair Studio",
                clinic_city="Izmir",
                clinic_country="Turkey",
                clinic_address="Kordon Blv. 12, Alsancak, Izmir",
                clinic_phone="+90 232 555 0177",
                clinic_website="https://aegeanhair.example.com",
                submitter_name="Daniel Brooks",
                submitter_id="user-patient-1",
            ),
        ],
        "newsletter_subscribers": [
            NewsletterSubscriber(id=701, email="hairnews@example.com", subscribed_at="2024-02-01"),
        ],
    }
