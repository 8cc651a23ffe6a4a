"""Sample newspaper used to seed the editor."""

from schemas.article import Article, InlineImage


def get_example_articles() -> list[Article]:
    """Five sample articles covering featured flags, categories, and an
    inline image referenced from the body."""
    return [
        Article(
            id=1,
            is_featured=True,
            category="Campus Life",
            title="Debate Team Wins State Championship",
            author="Jane Doe",
            date="Oct 25, 2025",
            summary=(
                "After months of rigorous practice, the Bowman High Debate Team secured a "
                "hard-fought victory at the state finals, bringing home the trophy for the "
                "first time in school history."
            ),
            image="https://placehold.co/800x600/EDDDD4/283D3B?text=DEBATE+WINS",
            accent_color_class="text-bowman-highlight",
            border_color_class="border-bowman-secondary/30",
            inline_images=[
                InlineImage(
                    url="https://placehold.co/800x450/772E25/EDDDD4?text=Team+Photo",
                    caption="The victorious debate team holding their championship trophy.",
                ),
            ],
            content=(
                "The air was thick with anticipation as the final round of the state debate "
                "championship began. Representing Bowman High, seniors Jane Doe and Mark Smith "
                "faced off against their rivals from Lincoln High in a tense policy debate on "
                "renewable energy.\n\n"
                "Their arguments, honed over countless hours of practice, were precise and "
                "compelling. The judges commended their 'masterful use of evidence and "
                "persuasive rhetoric.'\n\n"
                "<image-1>\n\n"
                "When the verdict was announced, the Bowman contingent erupted in cheers. "
                "'This is a dream come true,' said team captain Jane Doe. 'It's a testament to "
                "every person on this team and the endless support from our coach.' This "
                "victory marks a new era for the school's forensic program, promising a bright "
                "future for aspiring debaters."
            ),
        ),
        Article(
            id=2,
            is_featured=False,
            category="Sports",
            title="Football Team Dominates Season Opener",
            author="John Smith",
            date="Oct 24, 2025",
            summary=(
                "The Bowman Bears delivered a stunning 35-7 performance in the pre-season "
                "opener, signaling a promising season ahead."
            ),
            image="https://placehold.co/600x400/197278/EDDDD4?text=FOOTBALL",
            accent_color_class="text-bowman-secondary",
            border_color_class="border-bowman-secondary/30",
            content=(
                "The Bowman Bears delivered a stunning 35-7 performance in the pre-season "
                "opener. From the first whistle, the team showed incredible cohesion and "
                "strength. Quarterback Michael Lee threw for three touchdowns, connecting twice "
                "with wide receiver-star, David Chen, for impressive gains.\n\n"
                "The defense was equally formidable, holding the Lincoln Lions to just one "
                "touchdown in the final quarter. Coach Miller praised the team's 'unwavering "
                "focus and off-season dedication.' Fans are hopeful this momentum will carry "
                "them deep into the playoffs."
            ),
        ),
        Article(
            id=3,
            is_featured=False,
            category="Arts & Culture",
            title="Drama Club's 'Our Town' A Poignant Success",
            author="Alex Johnson",
            date="Oct 23, 2025",
            summary=(
                "The Drama Club's interpretation of the Thornton Wilder classic offered fresh "
                "perspectives on life, love, and loss, leaving the audience deeply moved."
            ),
            image="https://placehold.co/600x400/C44536/EDDDD4?text=THEATRE",
            accent_color_class="text-bowman-highlight",
            border_color_class="border-bowman-highlight/30",
            content=(
                "The Drama Club's rendition of 'Our Town' was a profound and moving experience. "
                "The minimalist set design placed the focus squarely on the actors' "
                "performances, and they delivered with remarkable depth.\n\n"
                "Sarah Jenkins, as Emily Webb, was a standout, capturing the character's journey "
                "with a nuance that belied her age. The final act was particularly powerful, "
                "leaving few dry eyes in the auditorium."
            ),
        ),
        Article(
            id=4,
            is_featured=True,
            category="Academics",
            title="New STEM Lab Opens",
            author="Jane Doe",
            date="Oct 22, 2025",
            summary=(
                "Thanks to a generous grant, the new Bowman STEM lab is officially open, "
                "featuring 3D printers, robotics kits, and a state-of-the-art chemistry station."
            ),
            image="https://placehold.co/800x600/283D3B/EDDDD4?text=STEM+LAB",
            accent_color_class="text-bowman-accent",
            border_color_class="border-bowman-accent/30",
            content=(
                "The ribbon-cutting ceremony for the new STEM lab was a celebration of the "
                "future. Principal Davies called it 'a quantum leap forward for our "
                "curriculum.' Students in the robotics club are already at work, programming "
                "autonomous vehicles for an upcoming competition.\n\n"
                "The lab will support new courses in engineering, biotechnology, and computer "
                "science."
            ),
        ),
        Article(
            id=5,
            is_featured=False,
            category="Opinion",
            title="The Case for a Later School Start Time",
            author="Editorial Board",
            date="Oct 21, 2025",
            summary=(
                "Sleep deprivation is an epidemic among teens. It's time for the school board "
                "to seriously consider pushing the first bell back to 8:30 a.m."
            ),
            image="https://placehold.co/600x400/EDDDD4/283D3B?text=OPINION",
            accent_color_class="text-bowman-accent",
            border_color_class="border-bowman-accent/30",
            content=(
                "The alarm rings at 6:00 a.m. For many Bowman students, this is the start of "
                "another day battling exhaustion. Numerous studies show that teenage brains are "
                "wired to stay up later and wake up later.\n\n"
                "Academic performance, mental health, and even physical safety are all "
                "compromised. We urge the school board to follow the science and implement a "
                "later start time."
            ),
        ),
    ]
