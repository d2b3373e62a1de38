"""
Domain question catalog.

Prioritized clarifying questions for each planning domain.

Priority levels:
- Priority 1 (Critical): asked first, required for a basic plan
- Priority 2 (Important): asked for a quality plan
- Priority 3 (Helpful): nice to have for a comprehensive plan

Quick mode only asks priority 1 questions (three per domain).
Smart mode asks priorities 1 through 3.
"""

from typing import Dict, Tuple

from journalmate.domains.schemas import Domain, DomainQuestion


TRAVEL_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="specificDestination",
        alternate_fields=("city", "cities", "region", "regions"),
        question="Which specific cities or regions in {destination} are you planning to visit?",
        priority=1,
        examples="e.g., Barcelona and Madrid, Costa del Sol, Andalusia region",
    ),
    DomainQuestion(
        field="dates",
        alternate_fields=("startDate", "endDate", "timeframe"),
        question="What are your exact travel dates? (start and end dates)",
        priority=1,
        examples="e.g., November 10-24, 2025",
    ),
    DomainQuestion(
        field="duration",
        alternate_fields=("lengthOfStay", "tripLength"),
        question="How long will you be traveling? (number of days or weeks)",
        priority=1,
        examples="e.g., 2 weeks, 10 days",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="budget",
        alternate_fields=("totalBudget", "spending"),
        question="What's your total budget for this trip?",
        priority=2,
        examples="e.g., $5000 USD, €3000",
    ),
    DomainQuestion(
        field="travelers",
        alternate_fields=("groupSize", "travelParty", "companions"),
        question="Who will be traveling? (solo, couple, family, group size)",
        priority=2,
        examples="e.g., solo, traveling with partner, family of 4",
    ),
    DomainQuestion(
        field="purpose",
        alternate_fields=("tripPurpose", "reason"),
        question="Is this trip for business or leisure? (or both)",
        priority=2,
        examples="e.g., business conference, leisure vacation, mix of both",
    ),
    DomainQuestion(
        field="interests",
        alternate_fields=("activities", "preferences"),
        question="What kinds of activities or experiences interest you?",
        priority=2,
        examples="e.g., beaches, culture, adventure, food, nightlife",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="specialNeeds",
        alternate_fields=("requirements", "constraints"),
        question="Any special requirements? (pets, dietary restrictions, accessibility needs)",
        priority=3,
        examples="e.g., traveling with pet, vegetarian, wheelchair accessible",
    ),
    DomainQuestion(
        field="accommodationType",
        alternate_fields=("lodging", "hotelPreference"),
        question="What type of accommodation do you prefer?",
        priority=3,
        examples="e.g., hotels, Airbnb, hostels, luxury resorts",
    ),
    DomainQuestion(
        field="pace",
        alternate_fields=("travelStyle", "intensity"),
        question="Do you prefer a relaxed pace or packed itinerary?",
        priority=3,
        examples="e.g., relaxed with downtime, action-packed, balanced",
    ),
)


EVENT_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="eventType",
        alternate_fields=("occasion", "eventCategory"),
        question="What type of event are you planning?",
        priority=1,
        examples="e.g., birthday party, wedding, conference, graduation",
    ),
    DomainQuestion(
        field="date",
        alternate_fields=("eventDate", "when"),
        question="What's the exact date of the event?",
        priority=1,
        examples="e.g., December 15, 2025",
    ),
    DomainQuestion(
        field="guestCount",
        alternate_fields=("attendees", "headcount", "numberOfGuests"),
        question="How many people are you expecting?",
        priority=1,
        examples="e.g., 50 people, around 30-40, intimate gathering of 15",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="budget",
        alternate_fields=("totalBudget", "spending"),
        question="What's your total budget for this event?",
        priority=2,
        examples="e.g., $2000, $500-1000",
    ),
    DomainQuestion(
        field="venue",
        alternate_fields=("location", "eventLocation"),
        question="Where will the event take place? (or do you need venue suggestions)",
        priority=2,
        examples="e.g., backyard, rented hall, restaurant, need suggestions",
    ),
    DomainQuestion(
        field="theme",
        alternate_fields=("vibe", "style", "aesthetic"),
        question="What theme or vibe are you going for?",
        priority=2,
        examples="e.g., elegant, casual, tropical, vintage",
    ),
    DomainQuestion(
        field="honoree",
        alternate_fields=("celebrant", "guestOfHonor"),
        question="Who is the event for? (age, interests, relationship)",
        priority=2,
        examples="e.g., my mom turning 60, my 5-year-old daughter",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="catering",
        alternate_fields=("food", "menu", "dining"),
        question="What are your catering plans? (homemade, catered, restaurant)",
        priority=3,
        examples="e.g., buffet style, plated dinner, appetizers only",
    ),
    DomainQuestion(
        field="activities",
        alternate_fields=("entertainment", "program"),
        question="What activities or entertainment do you have in mind?",
        priority=3,
        examples="e.g., DJ, games, speeches, dancing",
    ),
    DomainQuestion(
        field="specialRequirements",
        alternate_fields=("dietary", "accessibility"),
        question="Any dietary restrictions or special needs to accommodate?",
        priority=3,
        examples="e.g., vegetarian options, nut allergies, wheelchair access",
    ),
)


DINING_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="cuisineType",
        alternate_fields=("cuisine", "restaurantType", "foodType"),
        question="What type of cuisine or restaurant are you looking for?",
        priority=1,
        examples="e.g., Italian, sushi, steakhouse, fine dining",
    ),
    DomainQuestion(
        field="date",
        alternate_fields=("when", "diningDate"),
        question="When are you planning to dine?",
        priority=1,
        examples="e.g., tonight, this Saturday, December 20th",
    ),
    DomainQuestion(
        field="groupSize",
        alternate_fields=("diners", "partySize", "numberOfPeople"),
        question="How many people will be dining?",
        priority=1,
        examples="e.g., 2 people, party of 6, just me",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="budget",
        alternate_fields=("priceRange", "spending"),
        question="What's your budget per person?",
        priority=2,
        examples="e.g., $50 per person, under $30, fine dining budget",
    ),
    DomainQuestion(
        field="location",
        alternate_fields=("area", "neighborhood"),
        question="Which area or neighborhood do you prefer?",
        priority=2,
        examples="e.g., downtown, near Times Square, within 5 miles",
    ),
    DomainQuestion(
        field="occasion",
        alternate_fields=("purpose", "reason"),
        question="What's the occasion?",
        priority=2,
        examples="e.g., anniversary, business dinner, casual catch-up",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="dietary",
        alternate_fields=("dietaryRestrictions", "allergies"),
        question="Any dietary restrictions or allergies?",
        priority=3,
        examples="e.g., vegetarian, gluten-free, nut allergy",
    ),
    DomainQuestion(
        field="ambiance",
        alternate_fields=("atmosphere", "vibe"),
        question="What kind of atmosphere are you looking for?",
        priority=3,
        examples="e.g., romantic, lively, quiet, outdoor seating",
    ),
    DomainQuestion(
        field="specialRequests",
        question="Any special requests or preferences?",
        priority=3,
        examples="e.g., live music, waterfront view, private room",
    ),
)


WELLNESS_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="activityType",
        alternate_fields=("workoutType", "wellnessActivity"),
        question="What type of wellness activity are you planning?",
        priority=1,
        examples="e.g., gym workout, yoga, meditation, spa day",
    ),
    DomainQuestion(
        field="goals",
        alternate_fields=("objectives", "targets"),
        question="What are your wellness goals?",
        priority=1,
        examples="e.g., lose weight, build muscle, reduce stress, flexibility",
    ),
    DomainQuestion(
        field="frequency",
        alternate_fields=("schedule", "howOften"),
        question="How often do you want to do this?",
        priority=1,
        examples="e.g., 3 times a week, daily, every other day",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="currentLevel",
        alternate_fields=("experience", "fitnessLevel"),
        question="What's your current fitness/experience level?",
        priority=2,
        examples="e.g., beginner, intermediate, advanced, returning after break",
    ),
    DomainQuestion(
        field="timeAvailable",
        alternate_fields=("duration", "sessionLength"),
        question="How much time can you dedicate per session?",
        priority=2,
        examples="e.g., 30 minutes, 1 hour, 90 minutes",
    ),
    DomainQuestion(
        field="preferences",
        alternate_fields=("style", "approach"),
        question="Do you prefer solo activities or group classes?",
        priority=2,
        examples="e.g., solo workouts, group fitness, personal trainer",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="constraints",
        alternate_fields=("limitations", "injuries"),
        question="Any physical limitations or injuries to consider?",
        priority=3,
        examples="e.g., knee issues, lower back pain, pregnancy",
    ),
    DomainQuestion(
        field="equipment",
        alternate_fields=("resources", "access"),
        question="What equipment or facilities do you have access to?",
        priority=3,
        examples="e.g., gym membership, home equipment, outdoor space only",
    ),
    DomainQuestion(
        field="timeline",
        alternate_fields=("deadline", "targetDate"),
        question="Do you have a target date or timeline for your goals?",
        priority=3,
        examples="e.g., 3 months, before summer, no specific deadline",
    ),
)


LEARNING_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="topic",
        alternate_fields=("subject", "skill", "course"),
        question="What do you want to learn?",
        priority=1,
        examples="e.g., Spanish language, web development, photography",
    ),
    DomainQuestion(
        field="currentLevel",
        alternate_fields=("experience", "knowledge"),
        question="What's your current level with this topic?",
        priority=1,
        examples="e.g., complete beginner, some basics, intermediate",
    ),
    DomainQuestion(
        field="timeline",
        alternate_fields=("deadline", "duration", "timeframe"),
        question="How long do you have to learn this? (or what's your deadline)",
        priority=1,
        examples="e.g., 3 months, by June, ongoing long-term learning",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="learningStyle",
        alternate_fields=("preference", "method"),
        question="How do you prefer to learn?",
        priority=2,
        examples="e.g., video courses, books, hands-on practice, instructor-led",
    ),
    DomainQuestion(
        field="timeCommitment",
        alternate_fields=("hoursPerWeek", "studyTime"),
        question="How much time can you dedicate per week?",
        priority=2,
        examples="e.g., 5 hours/week, 30 min daily, weekends only",
    ),
    DomainQuestion(
        field="goals",
        alternate_fields=("objectives", "purpose"),
        question="Why do you want to learn this? (career, hobby, certification)",
        priority=2,
        examples="e.g., career change, personal interest, certification exam",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="budget",
        alternate_fields=("spending", "investment"),
        question="What's your budget for learning resources?",
        priority=3,
        examples="e.g., free only, $50/month, willing to invest significantly",
    ),
    DomainQuestion(
        field="certification",
        alternate_fields=("credential", "certificate"),
        question="Do you need certification or formal credentials?",
        priority=3,
        examples="e.g., yes for job, nice to have, not needed",
    ),
    DomainQuestion(
        field="resources",
        alternate_fields=("materials", "tools"),
        question="Do you already have any resources or tools?",
        priority=3,
        examples="e.g., textbooks, software, mentors, nothing yet",
    ),
)


SOCIAL_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="activityType",
        alternate_fields=("event", "gathering"),
        question="What kind of social activity are you planning?",
        priority=1,
        examples="e.g., game night, outdoor adventure, movie night, club outing",
    ),
    DomainQuestion(
        field="date",
        alternate_fields=("when", "timeframe"),
        question="When are you planning this?",
        priority=1,
        examples="e.g., this Friday, next weekend, sometime in December",
    ),
    DomainQuestion(
        field="groupSize",
        alternate_fields=("participants", "attendees"),
        question="How many people will be joining?",
        priority=1,
        examples="e.g., 4 friends, 10-15 people, just 2 of us",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="location",
        alternate_fields=("venue", "where"),
        question="Where do you want to do this? (or need location suggestions)",
        priority=2,
        examples="e.g., my place, downtown area, outdoor park, need ideas",
    ),
    DomainQuestion(
        field="budget",
        alternate_fields=("spending", "priceRange"),
        question="What's the budget per person?",
        priority=2,
        examples="e.g., free activity, $20-30 each, no limit",
    ),
    DomainQuestion(
        field="vibe",
        alternate_fields=("atmosphere", "mood"),
        question="What kind of vibe are you going for?",
        priority=2,
        examples="e.g., chill and relaxed, high energy, competitive fun",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="ageGroup",
        alternate_fields=("demographic", "crowd"),
        question="What's the age range of the group?",
        priority=3,
        examples="e.g., college friends, mixed ages, all 30s",
    ),
    DomainQuestion(
        field="interests",
        alternate_fields=("preferences", "likes"),
        question="What does the group enjoy doing?",
        priority=3,
        examples="e.g., board games, sports, trying new restaurants",
    ),
    DomainQuestion(
        field="specialConsiderations",
        question="Any special considerations?",
        priority=3,
        examples="e.g., indoor only, kid-friendly, no alcohol",
    ),
)


ENTERTAINMENT_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="entertainmentType",
        alternate_fields=("activityType", "event"),
        question="What type of entertainment are you looking for?",
        priority=1,
        examples="e.g., concert, movie, theater, comedy show, sports event",
    ),
    DomainQuestion(
        field="date",
        alternate_fields=("when", "timeframe"),
        question="When do you want to go?",
        priority=1,
        examples="e.g., tonight, this weekend, Friday December 15th",
    ),
    DomainQuestion(
        field="groupSize",
        alternate_fields=("attendees", "tickets"),
        question="How many tickets do you need?",
        priority=1,
        examples="e.g., 2 tickets, 4 people, just myself",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="budget",
        alternate_fields=("priceRange", "spending"),
        question="What's your budget per ticket?",
        priority=2,
        examples="e.g., under $50, $100-200, VIP experience",
    ),
    DomainQuestion(
        field="preferences",
        alternate_fields=("interests", "genre"),
        question="What genres or styles do you enjoy?",
        priority=2,
        examples="e.g., comedy, action movies, jazz, indie bands",
    ),
    DomainQuestion(
        field="location",
        alternate_fields=("venue", "area"),
        question="Which area or venues do you prefer?",
        priority=2,
        examples="e.g., downtown theaters, Madison Square Garden, anywhere in Manhattan",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="seating",
        alternate_fields=("seatPreference",),
        question="Any seating preferences?",
        priority=3,
        examples="e.g., orchestra section, balcony, close to stage",
    ),
    DomainQuestion(
        field="accessibility",
        alternate_fields=("specialNeeds",),
        question="Any accessibility requirements?",
        priority=3,
        examples="e.g., wheelchair accessible, assisted listening devices",
    ),
    DomainQuestion(
        field="beforeAfter",
        question="Planning dinner or drinks before/after?",
        priority=3,
        examples="e.g., yes need restaurant recommendations, no just the show",
    ),
)


WORK_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="projectType",
        alternate_fields=("task", "workType"),
        question="What work project or task are you planning?",
        priority=1,
        examples="e.g., product launch, team offsite, quarterly planning",
    ),
    DomainQuestion(
        field="deadline",
        alternate_fields=("timeline", "dueDate"),
        question="What's the deadline or timeline?",
        priority=1,
        examples="e.g., end of Q1, December 31st, 6 weeks from now",
    ),
    DomainQuestion(
        field="goals",
        alternate_fields=("deliverables", "objectives"),
        question="What are the key goals or deliverables?",
        priority=1,
        examples="e.g., launch new feature, increase sales 20%, complete audit",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="team",
        alternate_fields=("stakeholders", "people"),
        question="Who's involved? (team size, stakeholders)",
        priority=2,
        examples="e.g., 5-person team, cross-functional group of 15",
    ),
    DomainQuestion(
        field="resources",
        alternate_fields=("tools", "budget"),
        question="What resources or budget do you have?",
        priority=2,
        examples="e.g., $50K budget, existing tools, need to identify resources",
    ),
    DomainQuestion(
        field="constraints",
        alternate_fields=("challenges", "blockers"),
        question="Any constraints or known challenges?",
        priority=2,
        examples="e.g., limited budget, tight timeline, regulatory requirements",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="currentStatus",
        alternate_fields=("progress", "stage"),
        question="What's the current status or stage?",
        priority=3,
        examples="e.g., just starting, 25% complete, planning phase",
    ),
    DomainQuestion(
        field="dependencies",
        question="Any dependencies on other projects or teams?",
        priority=3,
        examples="e.g., waiting on legal approval, needs engineering sign-off",
    ),
    DomainQuestion(
        field="successMetrics",
        alternate_fields=("kpis", "measurements"),
        question="How will you measure success?",
        priority=3,
        examples="e.g., user adoption rate, revenue target, completion on time",
    ),
)


SHOPPING_QUESTIONS: Tuple[DomainQuestion, ...] = (
    # Priority 1: Critical
    DomainQuestion(
        field="itemType",
        alternate_fields=("category", "product"),
        question="What are you shopping for?",
        priority=1,
        examples="e.g., laptop, furniture, clothes, gifts",
    ),
    DomainQuestion(
        field="budget",
        alternate_fields=("priceRange", "spending"),
        question="What's your budget?",
        priority=1,
        examples="e.g., under $500, $1000-2000, flexible",
    ),
    DomainQuestion(
        field="timeline",
        alternate_fields=("deadline", "when"),
        question="When do you need this by?",
        priority=1,
        examples="e.g., ASAP, before Christmas, no rush",
    ),
    # Priority 2: Important
    DomainQuestion(
        field="purpose",
        alternate_fields=("occasion", "use"),
        question="What's the purpose or occasion?",
        priority=2,
        examples="e.g., birthday gift, home office setup, wedding registry",
    ),
    DomainQuestion(
        field="preferences",
        alternate_fields=("requirements", "mustHaves"),
        question="Any specific requirements or must-haves?",
        priority=2,
        examples="e.g., eco-friendly, specific brand, certain features",
    ),
    DomainQuestion(
        field="recipient",
        alternate_fields=("forWho", "user"),
        question="Who is this for? (if gift, tell me about them)",
        priority=2,
        examples="e.g., for myself, my tech-savvy dad, 8-year-old nephew",
    ),
    # Priority 3: Helpful
    DomainQuestion(
        field="shoppingPreference",
        alternate_fields=("where", "channel"),
        question="Do you prefer online or in-store shopping?",
        priority=3,
        examples="e.g., online only, prefer to see in person, either works",
    ),
    DomainQuestion(
        field="style",
        alternate_fields=("aesthetic", "design"),
        question="Any style or aesthetic preferences?",
        priority=3,
        examples="e.g., minimalist, vintage, modern, colorful",
    ),
    DomainQuestion(
        field="alternatives",
        question="Open to alternative suggestions?",
        priority=3,
        examples="e.g., yes show me options, no very specific in mind",
    ),
)


DOMAIN_QUESTIONS: Dict[Domain, Tuple[DomainQuestion, ...]] = {
    Domain.TRAVEL: TRAVEL_QUESTIONS,
    Domain.EVENT: EVENT_QUESTIONS,
    Domain.DINING: DINING_QUESTIONS,
    Domain.WELLNESS: WELLNESS_QUESTIONS,
    Domain.LEARNING: LEARNING_QUESTIONS,
    Domain.SOCIAL: SOCIAL_QUESTIONS,
    Domain.ENTERTAINMENT: ENTERTAINMENT_QUESTIONS,
    Domain.WORK: WORK_QUESTIONS,
    Domain.SHOPPING: SHOPPING_QUESTIONS,
}
